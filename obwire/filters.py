"""Responses about source filters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import DecodeError
from .messages import _bool, _field, _mapping, _str, _u32


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = _field(data, key)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DecodeError(f"invalid type for `{key}`: {value!r}, expected a list of strings")
    return list(value)


@dataclass(frozen=True)
class SourceFilter:
    """A filter attached to a source."""

    enabled: bool = False
    index: int = 0
    kind: str = ""
    name: str = ""
    settings: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SourceFilter:
        data = _mapping(data)
        name = data.get("filterName", "")
        if not isinstance(name, str):
            raise DecodeError(f"invalid type for `filterName`: {name!r}, expected a string")
        return cls(
            enabled=_bool(data, "filterEnabled"),
            index=_u32(data, "filterIndex"),
            kind=_str(data, "filterKind"),
            name=name,
            settings=_field(data, "filterSettings"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "filterEnabled": self.enabled,
            "filterIndex": self.index,
            "filterKind": self.kind,
            "filterName": self.name,
            "filterSettings": self.settings,
        }


def parse_filter_kinds(data: Mapping[str, Any]) -> list[str]:
    """Read the list of available filter kinds."""
    return _str_list(_mapping(data), "sourceFilterKinds")


def parse_filters(data: Mapping[str, Any]) -> list[SourceFilter]:
    """Read the filters of a source."""
    filters = _field(_mapping(data), "filters")
    if not isinstance(filters, list):
        raise DecodeError(f"invalid type for `filters`: {filters!r}, expected a list")
    return [SourceFilter.from_dict(item) for item in filters]


def parse_default_filter_settings(data: Mapping[str, Any]) -> Any:
    """Read the default settings of a filter kind."""
    return _field(_mapping(data), "defaultFilterSettings")