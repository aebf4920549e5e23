"""Wire encodings for audio track maps, embedded JSON strings and colours."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from .errors import DecodeError, EncodeError

_TRACK_KEYS = ("1", "2", "3", "4", "5", "6")
_U32_MAX = 0xFFFF_FFFF
_CONVERSION_FAILED = "out of range integral type conversion attempted"


def decode_audio_tracks(mapping: Mapping[str, bool]) -> tuple[bool, ...]:
    """Decode a ``{"1": bool, ..., "6": bool}`` map into six track states."""
    if not isinstance(mapping, Mapping):
        raise DecodeError(
            f"invalid type: {mapping!r}, expected audio tracks as key-value pairs"
        )
    tracks = [False] * len(_TRACK_KEYS)
    for key, value in mapping.items():
        if key not in _TRACK_KEYS:
            raise DecodeError(f"track index `{key}` is out of range")
        if not isinstance(value, bool):
            raise DecodeError(f"invalid type: {value!r}, expected a boolean")
        tracks[_TRACK_KEYS.index(key)] = value
    return tuple(tracks)


def encode_audio_tracks(tracks: Sequence[Optional[bool]]) -> dict[str, bool]:
    """Encode six optional track states, leaving out the unset ones."""
    if len(tracks) != len(_TRACK_KEYS):
        raise EncodeError(
            f"expected {len(_TRACK_KEYS)} audio tracks, got {len(tracks)}"
        )
    return {
        key: bool(value)
        for key, value in zip(_TRACK_KEYS, tracks)
        if value is not None
    }


def _to_plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def encode_json_string(value: Any) -> str:
    """Serialize a value to compact JSON text."""
    try:
        return json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=_to_plain
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(str(exc)) from exc


def decode_json_string(text: str) -> Any:
    """Parse a string that holds JSON text."""
    if not isinstance(text, str):
        raise DecodeError(
            f"invalid type: {text!r}, expected string value that contains JSON"
        )
    try:
        return json.loads(text)
    except ValueError as exc:
        raise DecodeError("failed deserializing JSON string") from exc


@dataclass(frozen=True)
class Rgba8:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise ValueError(f"colour channel must be an integer: {channel!r}")
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel out of range: {channel}")


def encode_rgba8_inverse(color: Rgba8) -> int:
    """Pack a colour into an integer in ABGR byte order."""
    return (color.a << 24) | (color.b << 16) | (color.g << 8) | color.r


def decode_rgba8_inverse(value: int) -> Rgba8:
    """Unpack an ABGR-ordered integer into a colour."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(
            f"invalid type: {value!r}, "
            "expected RGBA color encoded as u32 integer in reverse order"
        )
    if not 0 <= value <= _U32_MAX:
        raise DecodeError(f"value is too large for an u32: {_CONVERSION_FAILED}")
    a, b, g, r = value.to_bytes(4, "big")
    return Rgba8(r=r, g=g, b=b, a=a)