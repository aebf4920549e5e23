"""Responses about sources."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .messages import _bool, _mapping, _str


@dataclass(frozen=True, order=True)
class SourceActive:
    """Whether a source is shown in program and in the UI."""

    active: bool = False
    showing: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SourceActive:
        data = _mapping(data)
        return cls(active=_bool(data, "videoActive"), showing=_bool(data, "videoShowing"))

    def to_dict(self) -> dict[str, bool]:
        return {"videoActive": self.active, "videoShowing": self.showing}


def parse_image_data(data: Mapping[str, Any]) -> str:
    """Read the base64-encoded screenshot."""
    return _str(_mapping(data), "imageData")