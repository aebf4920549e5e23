"""Responses about profiles."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import DecodeError
from .messages import _field, _mapping, _str


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a string")
    return value


@dataclass(frozen=True, order=True)
class Profiles:
    """The current profile and all available ones."""

    current: str = ""
    profiles: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Profiles:
        data = _mapping(data)
        profiles = _field(data, "profiles")
        if not isinstance(profiles, list) or not all(isinstance(p, str) for p in profiles):
            raise DecodeError(
                f"invalid type for `profiles`: {profiles!r}, expected a list of strings"
            )
        return cls(current=_str(data, "currentProfileName"), profiles=list(profiles))

    def to_dict(self) -> dict[str, Any]:
        return {"currentProfileName": self.current, "profiles": list(self.profiles)}


@dataclass(frozen=True)
class ProfileParameter:
    """Value and default value of a profile parameter."""

    value: Optional[str] = None
    default_value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProfileParameter:
        data = _mapping(data)
        return cls(
            value=_optional_str(data, "parameterValue"),
            default_value=_optional_str(data, "defaultParameterValue"),
        )

    def to_dict(self) -> dict[str, Optional[str]]:
        return {"parameterValue": self.value, "defaultParameterValue": self.default_value}