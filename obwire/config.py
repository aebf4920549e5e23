"""Responses about the OBS configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from .messages import _field, _mapping, _str, _u32


@dataclass(frozen=True, order=True)
class VideoSettings:
    """Frame rate and resolutions of the video output."""

    fps_numerator: int = 0
    fps_denominator: int = 0
    base_width: int = 0
    base_height: int = 0
    output_width: int = 0
    output_height: int = 0

    _FIELDS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("fps_numerator", "fpsNumerator"),
        ("fps_denominator", "fpsDenominator"),
        ("base_width", "baseWidth"),
        ("base_height", "baseHeight"),
        ("output_width", "outputWidth"),
        ("output_height", "outputHeight"),
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VideoSettings:
        data = _mapping(data)
        return cls(**{attr: _u32(data, key) for attr, key in cls._FIELDS})

    def to_dict(self) -> dict[str, int]:
        return {key: getattr(self, attr) for attr, key in self._FIELDS}


@dataclass(frozen=True)
class StreamServiceSettings:
    """Type and settings of the stream service."""

    type: str = ""
    settings: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StreamServiceSettings:
        data = _mapping(data)
        return cls(
            type=_str(data, "streamServiceType"),
            settings=_field(data, "streamServiceSettings"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"streamServiceType": self.type, "streamServiceSettings": self.settings}


def parse_record_directory(data: Mapping[str, Any]) -> str:
    """Read the output directory of recordings."""
    return _str(_mapping(data), "recordDirectory")