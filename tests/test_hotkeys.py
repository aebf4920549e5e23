import pytest

from obwire.errors import DecodeError
from obwire.hotkeys import parse_hotkeys


def test_empty_list():
    assert parse_hotkeys({"hotkeys": []}) == []


def test_names():
    assert parse_hotkeys({"hotkeys": ["ReplayBuffer.Save"]}) == ["ReplayBuffer.Save"]


def test_missing_field():
    with pytest.raises(DecodeError, match="hotkeys"):
        parse_hotkeys({})