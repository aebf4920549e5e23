"""Conversions between durations and their wire forms.

Durations travel either as whole milliseconds or as a ``HH:MM:SS.mmm``
time code string.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Optional

from .errors import DecodeError, EncodeError

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_CONVERSION_FAILED = "out of range integral type conversion attempted"
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


def _trunc_rem(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def _total_micros(value: timedelta) -> int:
    return (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds


def _whole_millis(value: timedelta) -> int:
    return _trunc_div(_total_micros(value), 1_000)


def millis_to_duration(value: int) -> timedelta:
    """Decode a number of milliseconds into a duration."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(
            f"invalid type: {value!r}, expected a duration in milliseconds"
        )
    if value > _I64_MAX or value < _I64_MIN:
        raise DecodeError(f"value is too large for an i64: {_CONVERSION_FAILED}")
    try:
        return timedelta(milliseconds=value)
    except OverflowError as exc:
        raise DecodeError(f"duration out of range: {value}") from exc


def duration_to_millis(value: timedelta) -> int:
    """Encode a duration as whole milliseconds, truncated toward zero."""
    millis = _whole_millis(value)
    if millis > _I64_MAX or millis < _I64_MIN:
        raise EncodeError(f"value is too large for an i64: {_CONVERSION_FAILED}")
    return millis


def optional_millis_to_duration(value: Optional[int]) -> Optional[timedelta]:
    """Decode milliseconds into a duration, passing ``None`` through."""
    return None if value is None else millis_to_duration(value)


def optional_duration_to_millis(value: Optional[timedelta]) -> Optional[int]:
    """Encode a duration as milliseconds, passing ``None`` through."""
    return None if value is None else duration_to_millis(value)


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise DecodeError("invalid integer")
    number = int(text)
    if number > _I64_MAX or number < _I64_MIN:
        raise DecodeError("invalid integer")
    return number


def parse_timecode(text: str) -> timedelta:
    """Parse a ``HH:MM:SS.mmm`` time code into a duration."""
    if not isinstance(text, str):
        raise DecodeError(
            f"invalid type: {text!r}, expected a duration formatted as 'HH:MM:SS.mmm'"
        )
    parts = text.split(":", 2)
    hours = _parse_int(parts[0])
    if len(parts) < 2:
        raise DecodeError("minutes missing")
    minutes = _parse_int(parts[1])
    if len(parts) < 3:
        raise DecodeError("seconds missing")

    second_parts = parts[2].split(".", 1)
    seconds = _parse_int(second_parts[0])
    if len(second_parts) < 2:
        raise DecodeError("milliseconds missing")
    millis = _parse_int(second_parts[1])

    try:
        return timedelta(
            hours=hours, minutes=minutes, seconds=seconds, milliseconds=millis
        )
    except OverflowError as exc:
        raise DecodeError(f"time code out of range: {text}") from exc


def format_timecode(value: timedelta) -> str:
    """Format a duration as a ``HH:MM:SS.mmm`` time code."""
    micros = _total_micros(value)
    whole_secs = _trunc_div(micros, 1_000_000)
    hours = _trunc_div(whole_secs, 3600)
    minutes = _trunc_div(_trunc_rem(whole_secs, 3600), 60)
    seconds = _trunc_rem(_trunc_rem(whole_secs, 3600), 60)
    millis = _trunc_div(_trunc_rem(micros, 1_000_000), 1_000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"