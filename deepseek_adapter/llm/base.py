from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .completion import CompletionRequest, CompletionResponse

JSON = dict[str, Any]


class CompletionModel(ABC):
    """
    Strategy interface for each provider model.
    Concrete adapters build a vendor request and resolve the vendor response.
    """

    model: str

    # ---------- interface ----------
    @abstractmethod
    def build_request(self, request: CompletionRequest) -> JSON:
        """
        → vendor-shaped json payload
        """
        ...

    @abstractmethod
    def parse_response(self, data: JSON) -> CompletionResponse[Any]:
        """
        Resolve a decoded vendor payload to a CompletionResponse whose choice is
        either a MessageChoice or a ToolCallChoice.
        """
        ...

    @abstractmethod
    async def completion(self, request: CompletionRequest) -> CompletionResponse[Any]:
        """Send one request and return the resolved response."""
        ...

    # ---------- helpers ----------
    async def prompt(self, prompt: str) -> CompletionResponse[Any]:
        return await self.completion(CompletionRequest.from_prompt(prompt))
