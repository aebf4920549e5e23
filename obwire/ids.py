"""Identifiers that name an OBS object and carry its UUID."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar
from uuid import UUID

from .errors import DecodeError

_NIL_UUID = UUID(int=0)

_Id = TypeVar("_Id", bound="ItemId")


def _parse_uuid(value: Any, key: str) -> UUID:
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a UUID string")
    try:
        return UUID(value)
    except ValueError as exc:
        raise DecodeError(f"invalid UUID for `{key}`: {value!r}") from exc


@dataclass(frozen=True, eq=False)
class ItemId:
    """Name and UUID of an object in OBS.

    An identifier compares equal to another identifier of the same kind with
    the same name and UUID, to a string equal to its name and to a UUID equal
    to its UUID.
    """

    name: str = ""
    uuid: UUID = field(default_factory=lambda: _NIL_UUID)

    _name_field: ClassVar[str] = "name"
    _uuid_field: ClassVar[str] = "uuid"

    @classmethod
    def from_dict(cls: type[_Id], data: Mapping[str, Any]) -> _Id:
        """Read the identifier from a response object, ignoring other keys."""
        if not isinstance(data, Mapping):
            raise DecodeError(f"invalid type: {data!r}, expected an object")
        for key in (cls._name_field, cls._uuid_field):
            if key not in data:
                raise DecodeError(f"missing field `{key}`")
        name = data[cls._name_field]
        if not isinstance(name, str):
            raise DecodeError(
                f"invalid type for `{cls._name_field}`: {name!r}, expected a string"
            )
        return cls(name=name, uuid=_parse_uuid(data[cls._uuid_field], cls._uuid_field))

    def to_dict(self) -> dict[str, str]:
        """Write the identifier with its wire field names."""
        return {self._name_field: self.name, self._uuid_field: str(self.uuid)}

    def into(self, target: type[_Id]) -> _Id:
        """Convert into a related identifier kind that names the same object."""
        source = type(self)
        if target is source or frozenset((source, target)) in _CONVERSIONS:
            return target(name=self.name, uuid=self.uuid)
        raise TypeError(f"cannot convert {source.__name__} into {target.__name__}")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ItemId):
            return (
                type(self) is type(other)
                and self.name == other.name
                and self.uuid == other.uuid
            )
        if isinstance(other, str):
            return self.name == other
        if isinstance(other, UUID):
            return self.uuid == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name, self.uuid))


class InputId(ItemId):
    """Identifier of an input."""

    _name_field = "inputName"
    _uuid_field = "inputUuid"


class SceneId(ItemId):
    """Identifier of a scene."""

    _name_field = "sceneName"
    _uuid_field = "sceneUuid"


class SourceId(ItemId):
    """Identifier of a source."""

    _name_field = "sourceName"
    _uuid_field = "sourceUuid"


class TransitionId(ItemId):
    """Identifier of a transition."""

    _name_field = "transitionName"
    _uuid_field = "transitionUuid"


class CurrentPreviewSceneId(ItemId):
    """Identifier of the current preview scene."""

    _name_field = "currentPreviewSceneName"
    _uuid_field = "currentPreviewSceneUuid"


class CurrentProgramSceneId(ItemId):
    """Identifier of the current program scene."""

    _name_field = "currentProgramSceneName"
    _uuid_field = "currentProgramSceneUuid"


class CurrentSceneTransitionId(ItemId):
    """Identifier of the current scene transition."""

    _name_field = "currentSceneTransitionName"
    _uuid_field = "currentSceneTransitionUuid"


_CONVERSIONS = frozenset(
    {
        frozenset((SceneId, CurrentPreviewSceneId)),
        frozenset((SceneId, CurrentProgramSceneId)),
        frozenset((CurrentPreviewSceneId, CurrentProgramSceneId)),
        frozenset((TransitionId, CurrentSceneTransitionId)),
    }
)