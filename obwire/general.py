"""General responses that fit no other category."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

import semver

from .errors import DecodeError
from .messages import _field, _mapping, _str, _u32

_U64_MAX = 2**64 - 1


def _version(data: Mapping[str, Any], key: str) -> semver.Version:
    raw = _str(data, key)
    try:
        return semver.Version.parse(raw)
    except ValueError as exc:
        raise DecodeError(f"invalid version for `{key}`: {raw!r}") from exc


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = _field(data, key)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a list of strings")
    return list(value)


def _float(data: Mapping[str, Any], key: str) -> float:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a number")
    return float(value)


def _u64(data: Mapping[str, Any], key: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected an integer")
    if not 0 <= value <= _U64_MAX:
        raise DecodeError(f"invalid value for `{key}`: {value}, expected a u64")
    return value


@dataclass(frozen=True, order=True)
class Version:
    """Versions of OBS and obs-websocket, and what the server supports."""

    obs_version: semver.Version
    obs_web_socket_version: semver.Version
    rpc_version: int
    available_requests: list[str] = field(default_factory=list)
    supported_image_formats: list[str] = field(default_factory=list)
    platform: str = ""
    platform_description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Version:
        data = _mapping(data)
        return cls(
            obs_version=_version(data, "obsVersion"),
            obs_web_socket_version=_version(data, "obsWebSocketVersion"),
            rpc_version=_u32(data, "rpcVersion"),
            available_requests=_str_list(data, "availableRequests"),
            supported_image_formats=_str_list(data, "supportedImageFormats"),
            platform=_str(data, "platform"),
            platform_description=_str(data, "platformDescription"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "obsVersion": str(self.obs_version),
            "obsWebSocketVersion": str(self.obs_web_socket_version),
            "rpcVersion": self.rpc_version,
            "availableRequests": list(self.available_requests),
            "supportedImageFormats": list(self.supported_image_formats),
            "platform": self.platform,
            "platformDescription": self.platform_description,
        }


@dataclass(frozen=True)
class Stats:
    """Resource usage and frame statistics of OBS."""

    cpu_usage: float = 0.0
    memory_usage: float = 0.0
    available_disk_space: float = 0.0
    active_fps: float = 0.0
    average_frame_render_time: float = 0.0
    render_skipped_frames: int = 0
    render_total_frames: int = 0
    output_skipped_frames: int = 0
    output_total_frames: int = 0
    web_socket_session_incoming_messages: int = 0
    web_socket_session_outgoing_messages: int = 0

    _FLOATS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("cpu_usage", "cpuUsage"),
        ("memory_usage", "memoryUsage"),
        ("available_disk_space", "availableDiskSpace"),
        ("active_fps", "activeFps"),
        ("average_frame_render_time", "averageFrameRenderTime"),
    )
    _U32S: ClassVar[tuple[tuple[str, str], ...]] = (
        ("render_skipped_frames", "renderSkippedFrames"),
        ("render_total_frames", "renderTotalFrames"),
        ("output_skipped_frames", "outputSkippedFrames"),
        ("output_total_frames", "outputTotalFrames"),
    )
    _U64S: ClassVar[tuple[tuple[str, str], ...]] = (
        ("web_socket_session_incoming_messages", "webSocketSessionIncomingMessages"),
        ("web_socket_session_outgoing_messages", "webSocketSessionOutgoingMessages"),
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Stats:
        data = _mapping(data)
        values: dict[str, Any] = {}
        values.update({attr: _float(data, key) for attr, key in cls._FLOATS})
        values.update({attr: _u32(data, key) for attr, key in cls._U32S})
        values.update({attr: _u64(data, key) for attr, key in cls._U64S})
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {
            key: getattr(self, attr)
            for attr, key in self._FLOATS + self._U32S + self._U64S
        }


@dataclass(frozen=True)
class VendorResponse:
    """Reply of a third-party vendor to a vendor request."""

    vendor_name: str = ""
    request_type: str = ""
    response_data: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VendorResponse:
        data = _mapping(data)
        return cls(
            vendor_name=_str(data, "vendorName"),
            request_type=_str(data, "requestType"),
            response_data=_field(data, "responseData"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "vendorName": self.vendor_name,
            "requestType": self.request_type,
            "responseData": self.response_data,
        }