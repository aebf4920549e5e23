import pytest

from obwire.encoding import (
    Rgba8,
    decode_audio_tracks,
    decode_json_string,
    decode_rgba8_inverse,
    encode_audio_tracks,
    encode_json_string,
    encode_rgba8_inverse,
)
from obwire.errors import DecodeError, EncodeError


def test_audio_tracks_encode_skips_unset():
    encoded = encode_audio_tracks([True, True, None, None, False, True])
    assert encoded == {"1": True, "2": True, "5": False, "6": True}
    assert list(encoded) == ["1", "2", "5", "6"]


def test_audio_tracks_decode_full_map():
    decoded = decode_audio_tracks(
        {"1": True, "2": True, "3": False, "4": False, "5": False, "6": True}
    )
    assert decoded == (True, True, False, False, False, True)


def test_audio_tracks_decode_all_true():
    decoded = decode_audio_tracks({key: True for key in "123456"})
    assert decoded == (True,) * 6


def test_audio_tracks_decode_partial_defaults_false():
    assert decode_audio_tracks({"1": True}) == (True, False, False, False, False, False)


def test_audio_tracks_out_of_range():
    with pytest.raises(DecodeError) as info:
        decode_audio_tracks({"10": True})
    assert str(info.value) == "track index `10` is out of range"


def test_audio_tracks_encode_wrong_length():
    with pytest.raises(EncodeError):
        encode_audio_tracks([True])


def test_audio_tracks_roundtrip_when_all_set():
    tracks = (False, True, False, True, False, True)
    assert decode_audio_tracks(encode_audio_tracks(tracks)) == tracks


def test_json_string_roundtrip():
    assert encode_json_string({"value": 5}) == '{"value":5}'
    assert decode_json_string('{"value":5}') == {"value": 5}


def test_json_string_uses_to_dict():
    class Inner:
        def to_dict(self):
            return {"value": 5}

    assert encode_json_string(Inner()) == '{"value":5}'


def test_json_string_empty_fails():
    with pytest.raises(DecodeError) as info:
        decode_json_string("")
    assert str(info.value) == "failed deserializing JSON string"


def test_json_string_unserializable_fails():
    with pytest.raises(EncodeError):
        encode_json_string(object())


def test_rgba8_encode():
    assert encode_rgba8_inverse(Rgba8(1, 2, 3, 4)) == 0x0403_0201


def test_rgba8_decode():
    assert decode_rgba8_inverse(0x0403_0201) == Rgba8(1, 2, 3, 4)


def test_rgba8_decode_too_large():
    with pytest.raises(DecodeError) as info:
        decode_rgba8_inverse(2**32)
    assert "value is too large for an u32" in str(info.value)


def test_rgba8_decode_negative():
    with pytest.raises(DecodeError):
        decode_rgba8_inverse(-1)


def test_rgba8_channel_validation():
    with pytest.raises(ValueError):
        Rgba8(256, 0, 0, 0)


@pytest.mark.parametrize("color", [Rgba8(0, 0, 0, 0), Rgba8(255, 128, 7, 255)])
def test_rgba8_roundtrip(color):
    assert decode_rgba8_inverse(encode_rgba8_inverse(color)) == color