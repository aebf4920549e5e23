"""Responses about the virtual camera."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .messages import _bool, _mapping


def parse_output_active(data: Mapping[str, Any]) -> bool:
    """Read the new active state of the virtual camera."""
    return _bool(_mapping(data), "outputActive")