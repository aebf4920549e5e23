"""Responses about the replay buffer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .messages import _bool, _mapping, _str


def parse_output_active(data: Mapping[str, Any]) -> bool:
    """Read the new active state of the replay buffer."""
    return _bool(_mapping(data), "outputActive")


def parse_saved_replay_path(data: Mapping[str, Any]) -> str:
    """Read the file path of the last saved replay."""
    return _str(_mapping(data), "savedReplayPath")