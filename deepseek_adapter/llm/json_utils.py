"""Helpers for plain JSON-like trees (dicts, lists, scalars)."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

JSON = dict[str, Any]


def merge(base: JSON, overrides: JSON) -> JSON:
    """Deep-merge ``overrides`` into a copy of ``base``.

    Objects present on both sides are merged key by key, recursively. Any
    other override value (scalar, list, null) replaces the base value
    wholesale. Keys only present in ``overrides`` are added. Neither input
    is mutated.
    """
    merged = deepcopy(base)
    merge_inplace(merged, overrides)
    return merged


def merge_inplace(target: JSON, overrides: JSON) -> None:
    """Deep-merge ``overrides`` into ``target`` in place; overrides win."""
    for key, value in overrides.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merge_inplace(current, value)
        else:
            target[key] = deepcopy(value)
