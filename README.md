# obwire

Typed Python models for the messages an obs-websocket server sends to its
clients, together with the small wire encodings the protocol relies on.

The package turns already-decoded JSON (plain dictionaries) into frozen
dataclasses and enums, and most models turn back into dictionaries that use
the protocol's own field names through `to_dict()`.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Decoding server messages

```python
from obwire.messages import RequestResponse, decode_server_message

message = decode_server_message(raw_text)
if isinstance(message, RequestResponse):
    print(message.id, message.status.code, message.data)
```

`decode_server_message` takes JSON text (a `str` or `bytes`);
`parse_server_message` does the same for a dictionary you have already
decoded. Depending on the `op` code the result is a `Hello`, `Identified`,
`EventMessage`, `RequestResponse` or `RequestBatchResponse`. An unknown
`op` code, a missing field or a value of the wrong type raises
`obwire.errors.DecodeError`.

`obwire.messages` also holds the `StatusCode`, `WebSocketCloseCode` and
`OpCode` integer enums.

## Response models

Each area of the API has its own module: `config`, `filters`, `general`,
`hotkeys`, `inputs`, `media_inputs`, `outputs`, `profiles`, `recording`,
`replay_buffer`, `scene_collections`, `scene_items`, `scenes`, `sources`,
`streaming`, `transitions`, `ui` and `virtual_cam`.

```python
from obwire.general import Version
from obwire.outputs import OutputStatus

version = Version.from_dict(response.data)
print(version.obs_version, version.rpc_version)   # semver.Version, int

status = OutputStatus.from_dict(
    {
        "outputActive": True,
        "outputReconnecting": False,
        "outputTimecode": "12:30:45.678",
        "outputDuration": 50000,
        "outputCongestion": 0,
        "outputBytes": 1024,
        "outputSkippedFrames": 0,
        "outputTotalFrames": 250,
    }
)
print(status.timecode)     # a datetime.timedelta
print(status.to_dict())    # back to protocol field names
```

Responses that carry a single value have a `parse_*` function, for example
`obwire.inputs.parse_input_muted`, `obwire.scenes.parse_groups` or
`obwire.recording.parse_output_path`.

A few values are kept in their plain wire form rather than as enums: the
audio monitor type (`obwire.inputs.parse_audio_monitor_type`) and blend mode
(`obwire.scene_items.parse_blend_mode`) come back as their wire names, and
in `SceneItemTransform` the alignments are bit-flag integers and the bounds
type is its wire name. `MediaState.parse` maps unrecognised state names to
`MediaState.UNKNOWN`.

## Identifiers

`obwire.ids` holds `InputId`, `SceneId`, `SourceId`, `TransitionId`,
`CurrentPreviewSceneId`, `CurrentProgramSceneId` and
`CurrentSceneTransitionId`, all built on `ItemId`. Each carries a `name` and
a `uuid`, is read with `from_dict` and written with `to_dict`, compares equal
to another identifier of the same kind with the same name and UUID, to a
string equal to its name and to a `uuid.UUID` equal to its UUID. `into`
converts between related kinds (scene and current scene identifiers,
transition and current transition identifiers) and raises `TypeError`
otherwise.

## Wire encodings

`obwire.durations`:

```python
from datetime import timedelta
from obwire.durations import duration_to_millis, format_timecode, parse_timecode

parse_timecode("02:15:04.310")                 # timedelta(hours=2, minutes=15, ...)
format_timecode(timedelta(milliseconds=500))   # "00:00:00.500"
duration_to_millis(timedelta(seconds=1))       # 1000
```

`millis_to_duration`, `optional_millis_to_duration` and
`optional_duration_to_millis` complete the set; values outside the signed
64-bit range are rejected.

`obwire.encoding`:

```python
from obwire.encoding import Rgba8, encode_audio_tracks, encode_rgba8_inverse

encode_audio_tracks([True, True, None, None, False, True])
# {"1": True, "2": True, "5": False, "6": True}

encode_rgba8_inverse(Rgba8(r=1, g=2, b=3, a=4))   # 0x04030201
```

with `decode_audio_tracks`, `decode_rgba8_inverse`, `encode_json_string`
(compact JSON text) and `decode_json_string` as their counterparts.

Malformed input raises `obwire.errors.DecodeError`; values that cannot be
written raise `obwire.errors.EncodeError`. Both are subclasses of
`ValueError`.

## What this package does not do

- It opens no connections and performs no handshake or authentication; pair
  it with the websocket library of your choice.
- It has no request models: it only reads what the server sends back.
- Events are not decoded into typed models; an `EventMessage` carries the
  raw event payload in its `data` field.