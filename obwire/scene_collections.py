"""Responses about scene collections."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import DecodeError
from .messages import _field, _mapping, _str


@dataclass(frozen=True, order=True)
class SceneCollections:
    """The current scene collection and all available ones."""

    current: str = ""
    collections: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SceneCollections:
        data = _mapping(data)
        collections = _field(data, "sceneCollections")
        if not isinstance(collections, list) or not all(
            isinstance(c, str) for c in collections
        ):
            raise DecodeError(
                f"invalid type for `sceneCollections`: {collections!r}, "
                "expected a list of strings"
            )
        return cls(
            current=_str(data, "currentSceneCollectionName"),
            collections=list(collections),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentSceneCollectionName": self.current,
            "sceneCollections": list(self.collections),
        }