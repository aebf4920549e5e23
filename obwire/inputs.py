"""Responses about inputs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, ClassVar, Optional
from uuid import UUID

from .durations import millis_to_duration
from .encoding import decode_audio_tracks
from .errors import DecodeError
from .ids import InputId, _parse_uuid
from .messages import _bool, _field, _mapping, _str

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _float(data: Mapping[str, Any], key: str) -> float:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a number")
    return float(value)


def _i64(data: Mapping[str, Any], key: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected an integer")
    if not _I64_MIN <= value <= _I64_MAX:
        raise DecodeError(f"invalid value for `{key}`: {value}, expected an i64")
    return value


def _list(data: Mapping[str, Any], key: str) -> list:
    value = _field(data, key)
    if not isinstance(value, list):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a list")
    return value


@dataclass(frozen=True)
class Input:
    """An input with its kind."""

    id: InputId
    kind: str = ""
    unversioned_kind: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Input:
        data = _mapping(data)
        return cls(
            id=InputId.from_dict(data),
            kind=_str(data, "inputKind"),
            unversioned_kind=_str(data, "unversionedInputKind"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.id.to_dict(),
            "inputKind": self.kind,
            "unversionedInputKind": self.unversioned_kind,
        }


@dataclass(frozen=True)
class SpecialInputs:
    """Names of the special audio inputs, where they exist."""

    desktop1: Optional[str] = None
    desktop2: Optional[str] = None
    mic1: Optional[str] = None
    mic2: Optional[str] = None
    mic3: Optional[str] = None
    mic4: Optional[str] = None

    _KEYS: ClassVar[tuple[str, ...]] = (
        "desktop1",
        "desktop2",
        "mic1",
        "mic2",
        "mic3",
        "mic4",
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SpecialInputs:
        data = _mapping(data)
        values = {}
        for key in cls._KEYS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a string")
            values[key] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Optional[str]]:
        return {key: getattr(self, key) for key in self._KEYS}


@dataclass(frozen=True)
class InputSettings:
    """Settings of an input, with its kind."""

    settings: Any = None
    kind: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InputSettings:
        data = _mapping(data)
        return cls(settings=_field(data, "inputSettings"), kind=_str(data, "inputKind"))

    def to_dict(self) -> dict[str, Any]:
        return {"inputSettings": self.settings, "inputKind": self.kind}


@dataclass(frozen=True, order=True)
class InputVolume:
    """Volume of an input as a multiplier and in decibels."""

    mul: float = 0.0
    db: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InputVolume:
        data = _mapping(data)
        return cls(mul=_float(data, "inputVolumeMul"), db=_float(data, "inputVolumeDb"))

    def to_dict(self) -> dict[str, float]:
        return {"inputVolumeMul": self.mul, "inputVolumeDb": self.db}


@dataclass(frozen=True)
class ListPropertyItem:
    """One item of a list property."""

    name: str = ""
    enabled: bool = False
    value: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ListPropertyItem:
        data = _mapping(data)
        return cls(
            name=_str(data, "itemName"),
            enabled=_bool(data, "itemEnabled"),
            value=_field(data, "itemValue"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"itemName": self.name, "itemEnabled": self.enabled, "itemValue": self.value}


@dataclass(frozen=True, order=True)
class SceneItemId:
    """UUID of a newly created input and the ID of its scene item."""

    input_uuid: UUID
    scene_item_id: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SceneItemId:
        data = _mapping(data)
        return cls(
            input_uuid=_parse_uuid(_field(data, "inputUuid"), "inputUuid"),
            scene_item_id=_i64(data, "sceneItemId"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"inputUuid": str(self.input_uuid), "sceneItemId": self.scene_item_id}


def parse_inputs(data: Mapping[str, Any]) -> list[Input]:
    """Read the list of inputs."""
    return [Input.from_dict(item) for item in _list(_mapping(data), "inputs")]


def parse_input_kinds(data: Mapping[str, Any]) -> list[str]:
    """Read the list of input kinds."""
    kinds = _list(_mapping(data), "inputKinds")
    if not all(isinstance(kind, str) for kind in kinds):
        raise DecodeError(f"invalid type for `inputKinds`: {kinds!r}, expected strings")
    return list(kinds)


def parse_default_input_settings(data: Mapping[str, Any]) -> Any:
    """Read the default settings of an input kind."""
    return _field(_mapping(data), "defaultInputSettings")


def parse_input_muted(data: Mapping[str, Any]) -> bool:
    """Read whether an input is muted."""
    return _bool(_mapping(data), "inputMuted")


def parse_audio_balance(data: Mapping[str, Any]) -> float:
    """Read the audio balance of an input."""
    return _float(_mapping(data), "inputAudioBalance")


def parse_audio_sync_offset(data: Mapping[str, Any]) -> timedelta:
    """Read the audio sync offset of an input."""
    return millis_to_duration(_field(_mapping(data), "inputAudioSyncOffset"))


def parse_audio_monitor_type(data: Mapping[str, Any]) -> str:
    """Read the audio monitor type of an input, as its wire name."""
    return _str(_mapping(data), "monitorType")


def parse_audio_tracks(data: Mapping[str, Any]) -> tuple[bool, ...]:
    """Read which of the six audio tracks of an input are enabled."""
    return decode_audio_tracks(_field(_mapping(data), "inputAudioTracks"))


def parse_list_property_items(data: Mapping[str, Any]) -> list[ListPropertyItem]:
    """Read the items of a list property."""
    return [
        ListPropertyItem.from_dict(item)
        for item in _list(_mapping(data), "propertyItems")
    ]