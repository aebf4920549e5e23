"""Responses about hotkeys."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import DecodeError
from .messages import _field, _mapping


def parse_hotkeys(data: Mapping[str, Any]) -> list[str]:
    """Read the list of hotkey names."""
    hotkeys = _field(_mapping(data), "hotkeys")
    if not isinstance(hotkeys, list) or not all(isinstance(h, str) for h in hotkeys):
        raise DecodeError(f"invalid type for `hotkeys`: {hotkeys!r}, expected a list of strings")
    return list(hotkeys)