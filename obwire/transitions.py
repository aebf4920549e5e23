"""Responses about scene transitions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional

from .durations import optional_duration_to_millis, optional_millis_to_duration
from .errors import DecodeError
from .general import _float
from .ids import CurrentSceneTransitionId, TransitionId
from .messages import _bool, _field, _mapping, _str
from .scenes import _list, _optional_id


@dataclass(frozen=True)
class Transition:
    """A scene transition."""

    id: TransitionId = field(default_factory=TransitionId)
    kind: str = ""
    fixed: bool = False
    configurable: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Transition:
        data = _mapping(data)
        return cls(
            id=TransitionId.from_dict(data),
            kind=_str(data, "transitionKind"),
            fixed=_bool(data, "transitionFixed"),
            configurable=_bool(data, "transitionConfigurable"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.id.to_dict(),
            "transitionKind": self.kind,
            "transitionFixed": self.fixed,
            "transitionConfigurable": self.configurable,
        }


@dataclass(frozen=True)
class SceneTransitionList:
    """All transitions, with the current one."""

    current_scene_transition: Optional[CurrentSceneTransitionId] = None
    current_scene_transition_kind: Optional[str] = None
    transitions: list[Transition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SceneTransitionList:
        data = _mapping(data)
        kind = data.get("currentSceneTransitionKind")
        if kind is not None and not isinstance(kind, str):
            raise DecodeError(
                f"invalid type for `currentSceneTransitionKind`: {kind!r}, expected a string"
            )
        return cls(
            current_scene_transition=_optional_id(CurrentSceneTransitionId, data),
            current_scene_transition_kind=kind,
            transitions=[Transition.from_dict(t) for t in _list(data, "transitions")],
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.current_scene_transition is not None:
            result.update(self.current_scene_transition.to_dict())
        result["currentSceneTransitionKind"] = self.current_scene_transition_kind
        result["transitions"] = [t.to_dict() for t in self.transitions]
        return result


@dataclass(frozen=True)
class CurrentSceneTransition:
    """The current scene transition with its duration and settings."""

    id: TransitionId = field(default_factory=TransitionId)
    kind: str = ""
    fixed: bool = False
    duration: Optional[timedelta] = None
    configurable: bool = False
    settings: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CurrentSceneTransition:
        data = _mapping(data)
        return cls(
            id=TransitionId.from_dict(data),
            kind=_str(data, "transitionKind"),
            fixed=_bool(data, "transitionFixed"),
            duration=optional_millis_to_duration(_field(data, "transitionDuration")),
            configurable=_bool(data, "transitionConfigurable"),
            settings=data.get("transitionSettings"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.id.to_dict(),
            "transitionKind": self.kind,
            "transitionFixed": self.fixed,
            "transitionDuration": optional_duration_to_millis(self.duration),
            "transitionConfigurable": self.configurable,
            "transitionSettings": self.settings,
        }


def parse_transition_kinds(data: Mapping[str, Any]) -> list[str]:
    """Read the list of transition kinds."""
    kinds = _list(_mapping(data), "transitionKinds")
    if not all(isinstance(kind, str) for kind in kinds):
        raise DecodeError(f"invalid type for `transitionKinds`: {kinds!r}, expected strings")
    return list(kinds)


def parse_transition_cursor(data: Mapping[str, Any]) -> float:
    """Read the cursor position of the running transition."""
    return _float(_mapping(data), "transitionCursor")