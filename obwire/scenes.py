"""Responses about scenes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional, TypeVar
from uuid import UUID

from .durations import optional_duration_to_millis, optional_millis_to_duration
from .errors import DecodeError
from .ids import (
    CurrentPreviewSceneId,
    CurrentProgramSceneId,
    ItemId,
    SceneId,
    _parse_uuid,
)
from .messages import _field, _mapping

_Id = TypeVar("_Id", bound=ItemId)


def _optional_id(cls: type[_Id], data: Mapping[str, Any]) -> Optional[_Id]:
    """Read a flattened identifier, or ``None`` where it is absent or unreadable."""
    try:
        return cls.from_dict(data)
    except DecodeError:
        return None


def _list(data: Mapping[str, Any], key: str) -> list:
    value = _field(data, key)
    if not isinstance(value, list):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a list")
    return value


def _usize(data: Mapping[str, Any], key: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected an integer")
    if value < 0:
        raise DecodeError(f"invalid value for `{key}`: {value}, expected a usize")
    return value


@dataclass(frozen=True)
class Scene:
    """A scene with its position in the scene list."""

    id: SceneId = field(default_factory=SceneId)
    index: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Scene:
        data = _mapping(data)
        return cls(id=SceneId.from_dict(data), index=_usize(data, "sceneIndex"))

    def to_dict(self) -> dict[str, Any]:
        return {**self.id.to_dict(), "sceneIndex": self.index}


@dataclass(frozen=True)
class Scenes:
    """All scenes, with the current program and preview scenes."""

    current_program_scene: Optional[CurrentProgramSceneId] = None
    current_preview_scene: Optional[CurrentPreviewSceneId] = None
    scenes: list[Scene] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Scenes:
        data = _mapping(data)
        return cls(
            current_program_scene=_optional_id(CurrentProgramSceneId, data),
            current_preview_scene=_optional_id(CurrentPreviewSceneId, data),
            scenes=[Scene.from_dict(item) for item in _list(data, "scenes")],
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.current_program_scene is not None:
            result.update(self.current_program_scene.to_dict())
        if self.current_preview_scene is not None:
            result.update(self.current_preview_scene.to_dict())
        result["scenes"] = [scene.to_dict() for scene in self.scenes]
        return result


@dataclass(frozen=True)
class CurrentProgramScene:
    """The scene currently shown in program."""

    id: SceneId = field(default_factory=SceneId)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CurrentProgramScene:
        return cls(id=SceneId.from_dict(_mapping(data)))

    def to_dict(self) -> dict[str, str]:
        return self.id.to_dict()


@dataclass(frozen=True)
class CurrentPreviewScene:
    """The scene currently shown in preview."""

    id: SceneId = field(default_factory=SceneId)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CurrentPreviewScene:
        return cls(id=SceneId.from_dict(_mapping(data)))

    def to_dict(self) -> dict[str, str]:
        return self.id.to_dict()


@dataclass(frozen=True)
class SceneTransitionOverride:
    """Transition used instead of the default when switching to a scene."""

    name: Optional[str] = None
    duration: Optional[timedelta] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SceneTransitionOverride:
        data = _mapping(data)
        name = data.get("transitionName")
        if name is not None and not isinstance(name, str):
            raise DecodeError(
                f"invalid type for `transitionName`: {name!r}, expected a string"
            )
        return cls(
            name=name,
            duration=optional_millis_to_duration(_field(data, "transitionDuration")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "transitionName": self.name,
            "transitionDuration": optional_duration_to_millis(self.duration),
        }


def parse_groups(data: Mapping[str, Any]) -> list[str]:
    """Read the list of group names."""
    groups = _list(_mapping(data), "groups")
    if not all(isinstance(group, str) for group in groups):
        raise DecodeError(f"invalid type for `groups`: {groups!r}, expected strings")
    return list(groups)


def parse_created_scene_uuid(data: Mapping[str, Any]) -> UUID:
    """Read the UUID of a newly created scene."""
    return _parse_uuid(_field(_mapping(data), "sceneUuid"), "sceneUuid")