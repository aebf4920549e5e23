"""Responses about outputs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, ClassVar

from .durations import (
    duration_to_millis,
    format_timecode,
    millis_to_duration,
    parse_timecode,
)
from .errors import DecodeError
from .general import _float, _u64
from .messages import _bool, _field, _mapping, _str, _u32


@dataclass(frozen=True, order=True)
class OutputFlags:
    """Capabilities of an output."""

    audio: bool = False
    video: bool = False
    encoded: bool = False
    multi_track: bool = False
    service: bool = False

    _FIELDS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("audio", "OBS_OUTPUT_AUDIO"),
        ("video", "OBS_OUTPUT_VIDEO"),
        ("encoded", "OBS_OUTPUT_ENCODED"),
        ("multi_track", "OBS_OUTPUT_MULTI_TRACK"),
        ("service", "OBS_OUTPUT_SERVICE"),
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OutputFlags:
        data = _mapping(data)
        return cls(**{attr: _bool(data, key) for attr, key in cls._FIELDS})

    def to_dict(self) -> dict[str, bool]:
        return {key: getattr(self, attr) for attr, key in self._FIELDS}


@dataclass(frozen=True, order=True)
class Output:
    """An output with its kind, size, state and capabilities."""

    name: str = ""
    kind: str = ""
    width: int = 0
    height: int = 0
    active: bool = False
    flags: OutputFlags = field(default_factory=OutputFlags)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Output:
        data = _mapping(data)
        return cls(
            name=_str(data, "outputName"),
            kind=_str(data, "outputKind"),
            width=_u32(data, "outputWidth"),
            height=_u32(data, "outputHeight"),
            active=_bool(data, "outputActive"),
            flags=OutputFlags.from_dict(_field(data, "outputFlags")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "outputName": self.name,
            "outputKind": self.kind,
            "outputWidth": self.width,
            "outputHeight": self.height,
            "outputActive": self.active,
            "outputFlags": self.flags.to_dict(),
        }


@dataclass(frozen=True)
class OutputStatus:
    """Current state and statistics of an output."""

    active: bool = False
    reconnecting: bool = False
    timecode: timedelta = timedelta()
    duration: timedelta = timedelta()
    congestion: float = 0.0
    bytes: int = 0
    skipped_frames: int = 0
    total_frames: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OutputStatus:
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


def parse_outputs(data: Mapping[str, Any]) -> list[Output]:
    """Read the list of outputs."""
    outputs = _field(_mapping(data), "outputs")
    if not isinstance(outputs, list):
        raise DecodeError(f"invalid type for `outputs`: {outputs!r}, expected a list")
    return [Output.from_dict(item) for item in outputs]


def parse_output_active(data: Mapping[str, Any]) -> bool:
    """Read the new active state of an output."""
    return _bool(_mapping(data), "outputActive")


def parse_output_settings(data: Mapping[str, Any]) -> Any:
    """Read the settings of an output."""
    return _field(_mapping(data), "outputSettings")