"""Responses about recording."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .durations import (
    duration_to_millis,
    format_timecode,
    millis_to_duration,
    parse_timecode,
)
from .general import _u64
from .messages import _bool, _field, _mapping, _str


@dataclass(frozen=True, order=True)
class RecordStatus:
    """Current state of the record output."""

    active: bool = False
    paused: bool = False
    timecode: timedelta = timedelta()
    duration: timedelta = timedelta()
    bytes: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RecordStatus:
        data = _mapping(data)
        return cls(
            active=_bool(data, "outputActive"),
            paused=_bool(data, "outputPaused"),
            timecode=parse_timecode(_field(data, "outputTimecode")),
            duration=millis_to_duration(_field(data, "outputDuration")),
            bytes=_u64(data, "outputBytes"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "outputActive": self.active,
            "outputPaused": self.paused,
            "outputTimecode": format_timecode(self.timecode),
            "outputDuration": duration_to_millis(self.duration),
            "outputBytes": self.bytes,
        }


def parse_output_active(data: Mapping[str, Any]) -> bool:
    """Read the new active state of the record output."""
    return _bool(_mapping(data), "outputActive")


def parse_output_path(data: Mapping[str, Any]) -> str:
    """Read the file name of the saved recording."""
    return _str(_mapping(data), "outputPath")


def parse_output_paused(data: Mapping[str, Any]) -> bool:
    """Read the new paused state of the record output."""
    return _bool(_mapping(data), "outputPaused")