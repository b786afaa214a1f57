"""Exception hierarchy for completion calls."""

from __future__ import annotations


class CompletionError(Exception):
    """Base exception for a failed completion call."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProviderError(CompletionError):
    """The remote provider reported a problem or returned a non-success status.

    ``message`` holds the vendor-supplied error text, or the raw response body.
    """


class ResponseError(CompletionError):
    """The provider response could not be interpreted locally."""
