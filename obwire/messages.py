"""Messages sent by the server over the web-socket connection."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Union

import semver

from .errors import DecodeError

_U32_MAX = 0xFFFF_FFFF


class StatusCode(IntEnum):
    """Result of a request, giving detail on what went wrong if it failed."""

    UNKNOWN = 0
    NO_ERROR = 10
    SUCCESS = 100
    MISSING_REQUEST_TYPE = 203
    UNKNOWN_REQUEST_TYPE = 204
    GENERIC_ERROR = 205
    UNSUPPORTED_REQUEST_BATCH_EXECUTION_TYPE = 206
    NOT_READY = 207
    MISSING_REQUEST_FIELD = 300
    MISSING_REQUEST_DATA = 301
    INVALID_REQUEST_FIELD = 400
    INVALID_REQUEST_FIELD_TYPE = 401
    REQUEST_FIELD_OUT_OF_RANGE = 402
    REQUEST_FIELD_EMPTY = 403
    TOO_MANY_REQUEST_FIELDS = 404
    OUTPUT_RUNNING = 500
    OUTPUT_NOT_RUNNING = 501
    OUTPUT_PAUSED = 502
    OUTPUT_NOT_PAUSED = 503
    OUTPUT_DISABLED = 504
    STUDIO_MODE_ACTIVE = 505
    STUDIO_MODE_NOT_ACTIVE = 506
    RESOURCE_NOT_FOUND = 600
    RESOURCE_ALREADY_EXISTS = 601
    INVALID_RESOURCE_TYPE = 602
    NOT_ENOUGH_RESOURCES = 603
    INVALID_RESOURCE_STATE = 604
    INVALID_INPUT_KIND = 605
    RESOURCE_NOT_CONFIGURABLE = 606
    INVALID_FILTER_KIND = 607
    RESOURCE_CREATION_FAILED = 700
    RESOURCE_ACTION_FAILED = 701
    REQUEST_PROCESSING_FAILED = 702
    CANNOT_ACT = 703


class WebSocketCloseCode(IntEnum):
    """Close codes the server uses to explain why it closed the connection."""

    UNKNOWN_REASON = 4000
    MESSAGE_DECODE_ERROR = 4002
    MISSING_DATA_FIELD = 4003
    INVALID_DATA_FIELD_TYPE = 4004
    INVALID_DATA_FIELD_VALUE = 4005
    UNKNOWN_OP_CODE = 4006
    NOT_IDENTIFIED = 4007
    ALREADY_IDENTIFIED = 4008
    AUTHENTICATION_FAILED = 4009
    UNSUPPORTED_RPC_VERSION = 4010
    SESSION_INVALIDATED = 4011
    UNSUPPORTED_FEATURE = 4012


class OpCode(IntEnum):
    """Operation codes of messages sent by the server."""

    HELLO = 0
    IDENTIFIED = 2
    EVENT = 5
    REQUEST_RESPONSE = 7
    REQUEST_BATCH_RESPONSE = 9


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DecodeError(f"invalid type: {data!r}, expected an object")
    return data


def _field(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise DecodeError(f"missing field `{key}`")
    return data[key]


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a string")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = _field(data, key)
    if not isinstance(value, bool):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a boolean")
    return value


def _u32(data: Mapping[str, Any], key: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected an integer")
    if not 0 <= value <= _U32_MAX:
        raise DecodeError(f"invalid value for `{key}`: {value}, expected a u32")
    return value


@dataclass(frozen=True)
class Authentication:
    """Challenge and salt the client needs to authenticate."""

    challenge: str
    salt: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Authentication:
        data = _mapping(data)
        return cls(challenge=_str(data, "challenge"), salt=_str(data, "salt"))


@dataclass(frozen=True)
class Hello:
    """First message from the server, with version and authentication details."""

    obs_web_socket_version: semver.Version
    rpc_version: int
    authentication: Optional[Authentication] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Hello:
        data = _mapping(data)
        raw_version = _str(data, "obsWebSocketVersion")
        try:
            version = semver.Version.parse(raw_version)
        except ValueError as exc:
            raise DecodeError(f"invalid version: {raw_version!r}") from exc
        raw_auth = data.get("authentication")
        return cls(
            obs_web_socket_version=version,
            rpc_version=_u32(data, "rpcVersion"),
            authentication=None if raw_auth is None else Authentication.from_dict(raw_auth),
        )


@dataclass(frozen=True)
class Identified:
    """Confirmation that the client is identified and ready to use."""

    negotiated_rpc_version: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Identified:
        data = _mapping(data)
        return cls(negotiated_rpc_version=_u32(data, "negotiatedRpcVersion"))


@dataclass(frozen=True)
class Status:
    """Outcome of a single request."""

    result: bool
    code: StatusCode
    comment: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Status:
        data = _mapping(data)
        raw_code = _field(data, "code")
        if isinstance(raw_code, bool) or not isinstance(raw_code, int):
            raise DecodeError(f"invalid type for `code`: {raw_code!r}, expected an integer")
        try:
            code = StatusCode(raw_code)
        except ValueError as exc:
            raise DecodeError(f"invalid status code: {raw_code}") from exc
        comment = data.get("comment")
        if comment is not None and not isinstance(comment, str):
            raise DecodeError(f"invalid type for `comment`: {comment!r}, expected a string")
        return cls(result=_bool(data, "result"), code=code, comment=comment)


@dataclass(frozen=True)
class RequestResponse:
    """Server reply to one request."""

    type: str
    id: str
    status: Status
    data: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RequestResponse:
        data = _mapping(data)
        return cls(
            type=_str(data, "requestType"),
            id=_str(data, "requestId"),
            status=Status.from_dict(_field(data, "requestStatus")),
            data=data.get("responseData"),
        )


@dataclass(frozen=True)
class RequestBatchResponse:
    """Server reply to a batch of requests."""

    id: str
    results: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RequestBatchResponse:
        data = _mapping(data)
        results = _field(data, "results")
        if not isinstance(results, list):
            raise DecodeError(f"invalid type for `results`: {results!r}, expected a list")
        return cls(id=_str(data, "requestId"), results=list(results))


@dataclass(frozen=True)
class EventMessage:
    """An event from OBS, kept as its raw payload."""

    data: Any = None


ServerMessage = Union[Hello, Identified, EventMessage, RequestResponse, RequestBatchResponse]


def parse_server_message(data: Mapping[str, Any]) -> ServerMessage:
    """Turn a decoded ``{"op": ..., "d": ...}`` object into a message."""
    data = _mapping(data)
    raw_op = _field(data, "op")
    payload = _field(data, "d")
    if isinstance(raw_op, bool) or not isinstance(raw_op, int):
        raise DecodeError(f"invalid type for `op`: {raw_op!r}, expected an integer")
    try:
        op = OpCode(raw_op)
    except ValueError as exc:
        expected = ", ".join(str(code.value) for code in OpCode)
        raise DecodeError(f"invalid value: {raw_op}, expected one of {expected}") from exc

    if op is OpCode.HELLO:
        return Hello.from_dict(payload)
    if op is OpCode.IDENTIFIED:
        return Identified.from_dict(payload)
    if op is OpCode.EVENT:
        return EventMessage(data=payload)
    if op is OpCode.REQUEST_RESPONSE:
        return RequestResponse.from_dict(payload)
    return RequestBatchResponse.from_dict(payload)


def decode_server_message(text: Union[str, bytes]) -> ServerMessage:
    """Parse the JSON text of a server message."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"invalid JSON message: {exc}") from exc
    return parse_server_message(data)