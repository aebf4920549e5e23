"""Responses about the user interface."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import DecodeError
from .messages import _bool, _field, _mapping, _str, _u32
from .scenes import _list


def _ranged_int(data: Mapping[str, Any], key: str, low: int, high: int, kind: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected an integer")
    if not low <= value <= high:
        raise DecodeError(f"invalid value for `{key}`: {value}, expected a {kind}")
    return value


@dataclass(frozen=True, order=True)
class MonitorSize:
    """Pixel size of a monitor."""

    width: int = 0
    height: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MonitorSize:
        data = _mapping(data)
        return cls(
            width=_ranged_int(data, "monitorWidth", 0, 0xFFFF, "u16"),
            height=_ranged_int(data, "monitorHeight", 0, 0xFFFF, "u16"),
        )

    def to_dict(self) -> dict[str, int]:
        return {"monitorWidth": self.width, "monitorHeight": self.height}


@dataclass(frozen=True, order=True)
class MonitorPosition:
    """Position of a monitor on the screen."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MonitorPosition:
        data = _mapping(data)
        return cls(
            x=_ranged_int(data, "monitorPositionX", -(2**31), 2**31 - 1, "i32"),
            y=_ranged_int(data, "monitorPositionY", -(2**31), 2**31 - 1, "i32"),
        )

    def to_dict(self) -> dict[str, int]:
        return {"monitorPositionX": self.x, "monitorPositionY": self.y}


@dataclass(frozen=True, order=True)
class Monitor:
    """A monitor connected to the machine running OBS."""

    name: str = ""
    index: int = 0
    size: MonitorSize = field(default_factory=MonitorSize)
    position: MonitorPosition = field(default_factory=MonitorPosition)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Monitor:
        data = _mapping(data)
        return cls(
            name=_str(data, "monitorName"),
            index=_u32(data, "monitorIndex"),
            size=MonitorSize.from_dict(data),
            position=MonitorPosition.from_dict(data),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "monitorName": self.name,
            "monitorIndex": self.index,
            **self.size.to_dict(),
            **self.position.to_dict(),
        }


def parse_studio_mode_enabled(data: Mapping[str, Any]) -> bool:
    """Read whether studio mode is enabled."""
    return _bool(_mapping(data), "studioModeEnabled")


def parse_monitors(data: Mapping[str, Any]) -> list[Monitor]:
    """Read the list of monitors."""
    return [Monitor.from_dict(item) for item in _list(_mapping(data), "monitors")]