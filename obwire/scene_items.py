"""Responses about scene items."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

from .errors import DecodeError
from .general import _float
from .inputs import _i64
from .messages import _bool, _field, _mapping, _str, _u32


class SourceType(Enum):
    """Kind of source a scene item represents."""

    INPUT = "OBS_SOURCE_TYPE_INPUT"
    FILTER = "OBS_SOURCE_TYPE_FILTER"
    TRANSITION = "OBS_SOURCE_TYPE_TRANSITION"
    SCENE = "OBS_SOURCE_TYPE_SCENE"


def _list(data: Mapping[str, Any], key: str) -> list:
    value = _field(data, key)
    if not isinstance(value, list):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a list")
    return value


@dataclass(frozen=True)
class SceneItem:
    """An item in a scene or group."""

    id: int
    index: int
    source_name: str
    source_type: SourceType
    input_kind: Optional[str] = None
    is_group: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SceneItem:
        data = _mapping(data)
        raw_type = _str(data, "sourceType")
        try:
            source_type = SourceType(raw_type)
        except ValueError as exc:
            raise DecodeError(f"unknown source type: {raw_type!r}") from exc
        input_kind = data.get("inputKind")
        if input_kind is not None and not isinstance(input_kind, str):
            raise DecodeError(
                f"invalid type for `inputKind`: {input_kind!r}, expected a string"
            )
        is_group = data.get("isGroup")
        if is_group is not None and not isinstance(is_group, bool):
            raise DecodeError(f"invalid type for `isGroup`: {is_group!r}, expected a boolean")
        return cls(
            id=_i64(data, "sceneItemId"),
            index=_u32(data, "sceneItemIndex"),
            source_name=_str(data, "sourceName"),
            source_type=source_type,
            input_kind=input_kind,
            is_group=is_group,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sceneItemId": self.id,
            "sceneItemIndex": self.index,
            "sourceName": self.source_name,
            "sourceType": self.source_type.value,
            "inputKind": self.input_kind,
            "isGroup": self.is_group,
        }


@dataclass(frozen=True)
class SceneItemTransform:
    """Position, scale, bounds and crop of a scene item.

    Alignments are kept as their bit-flag integers and the bounds type as its
    wire name.
    """

    source_width: float = 0.0
    source_height: float = 0.0
    position_x: float = 0.0
    position_y: float = 0.0
    rotation: float = 0.0
    scale_x: float = 0.0
    scale_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    alignment: int = 0
    bounds_type: str = "OBS_BOUNDS_NONE"
    bounds_alignment: int = 0
    bounds_width: float = 0.0
    bounds_height: float = 0.0
    crop_left: int = 0
    crop_right: int = 0
    crop_top: int = 0
    crop_bottom: int = 0
    crop_to_bounds: bool = False

    _FLOATS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("source_width", "sourceWidth"),
        ("source_height", "sourceHeight"),
        ("position_x", "positionX"),
        ("position_y", "positionY"),
        ("rotation", "rotation"),
        ("scale_x", "scaleX"),
        ("scale_y", "scaleY"),
        ("width", "width"),
        ("height", "height"),
        ("bounds_width", "boundsWidth"),
        ("bounds_height", "boundsHeight"),
    )
    _U32S: ClassVar[tuple[tuple[str, str], ...]] = (
        ("alignment", "alignment"),
        ("bounds_alignment", "boundsAlignment"),
        ("crop_left", "cropLeft"),
        ("crop_right", "cropRight"),
        ("crop_top", "cropTop"),
        ("crop_bottom", "cropBottom"),
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SceneItemTransform:
        data = _mapping(data)
        values: dict[str, Any] = {}
        values.update({attr: _float(data, key) for attr, key in cls._FLOATS})
        values.update({attr: _u32(data, key) for attr, key in cls._U32S})
        values["bounds_type"] = _str(data, "boundsType")
        crop_to_bounds = data.get("cropToBounds", False)
        if not isinstance(crop_to_bounds, bool):
            raise DecodeError(
                f"invalid type for `cropToBounds`: {crop_to_bounds!r}, expected a boolean"
            )
        values["crop_to_bounds"] = crop_to_bounds
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        result = {key: getattr(self, attr) for attr, key in self._FLOATS + self._U32S}
        result["boundsType"] = self.bounds_type
        result["cropToBounds"] = self.crop_to_bounds
        return result


def parse_scene_item_id(data: Mapping[str, Any]) -> int:
    """Read the numeric ID of a scene item."""
    return _i64(_mapping(data), "sceneItemId")


def parse_scene_items(data: Mapping[str, Any]) -> list[SceneItem]:
    """Read the items of a scene or group."""
    return [SceneItem.from_dict(item) for item in _list(_mapping(data), "sceneItems")]


def parse_transform(data: Mapping[str, Any]) -> SceneItemTransform:
    """Read the transform of a scene item."""
    return SceneItemTransform.from_dict(_field(_mapping(data), "sceneItemTransform"))


def parse_enabled(data: Mapping[str, Any]) -> bool:
    """Read whether a scene item is enabled."""
    return _bool(_mapping(data), "sceneItemEnabled")


def parse_locked(data: Mapping[str, Any]) -> bool:
    """Read whether a scene item is locked."""
    return _bool(_mapping(data), "sceneItemLocked")


def parse_index(data: Mapping[str, Any]) -> int:
    """Read the index position of a scene item."""
    return _u32(_mapping(data), "sceneItemIndex")


def parse_blend_mode(data: Mapping[str, Any]) -> str:
    """Read the blend mode of a scene item, as its wire name."""
    return _str(_mapping(data), "sceneItemBlendMode")


def parse_private_settings(data: Mapping[str, Any]) -> Any:
    """Read the private settings of a scene item."""
    return _field(_mapping(data), "sceneItemSettings")