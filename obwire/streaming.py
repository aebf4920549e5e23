"""Responses about streaming."""

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
from .general import _float, _u64
from .messages import _bool, _field, _mapping, _u32


@dataclass(frozen=True)
class StreamStatus:
    """Current state and statistics of the stream output."""

    active: bool = False
    reconnecting: bool = False
    timecode: timedelta = timedelta()
    duration: timedelta = timedelta()
    congestion: float = 0.0
    bytes: int = 0
    skipped_frames: int = 0
    total_frames: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StreamStatus:
        data = _mapping(data)
        return cls(
            active=_bool(data, "outputActive"),
            reconnecting=_bool(data, "outputReconnecting"),
            timecode=parse_timecode(_field(data, "outputTimecode")),
            duration=millis_to_duration(_field(data, "outputDuration")),
            congestion=_float(data, "outputCongestion"),
            bytes=_u64(data, "outputBytes"),
            skipped_frames=_u32(data, "outputSkippedFrames"),
            total_frames=_u32(data, "outputTotalFrames"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "outputActive": self.active,
            "outputReconnecting": self.reconnecting,
            "outputTimecode": format_timecode(self.timecode),
            "outputDuration": duration_to_millis(self.duration),
            "outputCongestion": self.congestion,
            "outputBytes": self.bytes,
            "outputSkippedFrames": self.skipped_frames,
            "outputTotalFrames": self.total_frames,
        }


def parse_output_active(data: Mapping[str, Any]) -> bool:
    """Read the new active state of the stream output."""
    return _bool(_mapping(data), "outputActive")