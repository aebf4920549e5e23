import pytest

from obwire.durations import parse_timecode
from obwire.encoding import (
    decode_audio_tracks,
    decode_json_string,
    decode_rgba8_inverse,
    encode_json_string,
)
from obwire.errors import DecodeError, EncodeError


def test_timecode_error_is_a_value_error():
    with pytest.raises(ValueError, match="minutes missing") as info:
        parse_timecode("12")
    assert isinstance(info.value, DecodeError)


def test_audio_track_error_message():
    with pytest.raises(DecodeError) as info:
        decode_audio_tracks({"10": True})
    assert str(info.value) == "track index `10` is out of range"


def test_json_string_error_keeps_cause():
    with pytest.raises(DecodeError, match="failed deserializing JSON string") as info:
        decode_json_string("")
    assert isinstance(info.value.__cause__, ValueError)


def test_rgba_value_too_large():
    with pytest.raises(DecodeError, match="too large for an u32"):
        decode_rgba8_inverse(1 << 40)


def test_encode_error_is_not_a_decode_error():
    caught = []
    with pytest.raises(EncodeError) as info:
        try:
            encode_json_string({1, 2})
        except DecodeError:
            caught.append("decode")
    assert caught == []
    assert isinstance(info.value, ValueError)