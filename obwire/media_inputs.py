"""Responses about media inputs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Optional

from .durations import optional_duration_to_millis, optional_millis_to_duration
from .errors import DecodeError
from .messages import _field, _mapping


class MediaState(Enum):
    """Playback state of a media input."""

    NONE = "OBS_MEDIA_STATE_NONE"
    PLAYING = "OBS_MEDIA_STATE_PLAYING"
    OPENING = "OBS_MEDIA_STATE_OPENING"
    BUFFERING = "OBS_MEDIA_STATE_BUFFERING"
    PAUSED = "OBS_MEDIA_STATE_PAUSED"
    STOPPED = "OBS_MEDIA_STATE_STOPPED"
    ENDED = "OBS_MEDIA_STATE_ENDED"
    ERROR = "OBS_MEDIA_STATE_ERROR"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: Any) -> MediaState:
        """Read a state from its wire name; unrecognised names become UNKNOWN."""
        if not isinstance(value, str):
            raise DecodeError(f"invalid type: {value!r}, expected a media state string")
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class MediaStatus:
    """State, length and position of a media input."""

    state: MediaState = MediaState.NONE
    duration: Optional[timedelta] = None
    cursor: Optional[timedelta] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MediaStatus:
        data = _mapping(data)
        return cls(
            state=MediaState.parse(_field(data, "mediaState")),
            duration=optional_millis_to_duration(_field(data, "mediaDuration")),
            cursor=optional_millis_to_duration(_field(data, "mediaCursor")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "mediaState": self.state.value,
            "mediaDuration": optional_duration_to_millis(self.duration),
            "mediaCursor": optional_duration_to_millis(self.cursor),
        }