from uuid import UUID

import pytest

from obwire.errors import DecodeError
from obwire.ids import (
    CurrentPreviewSceneId,
    CurrentProgramSceneId,
    CurrentSceneTransitionId,
    InputId,
    SceneId,
    SourceId,
    TransitionId,
)

SAMPLE_UUID = UUID(bytes=bytes([1] * 16))
OTHER_UUID = UUID(bytes=bytes([2] * 16))


def _wire(prefix, name="main", uuid=SAMPLE_UUID):
    return {f"{prefix}Name": name, f"{prefix}Uuid": str(uuid)}


def test_from_dict_reads_wire_fields():
    assert InputId.from_dict(_wire("input", "text")) == InputId(
        name="text", uuid=SAMPLE_UUID
    )
    assert SceneId.from_dict(_wire("scene")) == SceneId(name="main", uuid=SAMPLE_UUID)
    assert SourceId.from_dict(_wire("source")).name == "main"
    assert TransitionId.from_dict(_wire("transition")).uuid == SAMPLE_UUID
    preview = CurrentPreviewSceneId.from_dict(_wire("currentPreviewScene", "p"))
    assert (preview.name, preview.uuid) == ("p", SAMPLE_UUID)
    program = CurrentProgramSceneId.from_dict(_wire("currentProgramScene", "q"))
    assert (program.name, program.uuid) == ("q", SAMPLE_UUID)
    current = CurrentSceneTransitionId.from_dict(_wire("currentSceneTransition", "t"))
    assert (current.name, current.uuid) == ("t", SAMPLE_UUID)


def test_round_trip():
    item = InputId(name="main", uuid=SAMPLE_UUID)
    assert set(item.to_dict()) == {"inputName", "inputUuid"}
    assert InputId.from_dict(item.to_dict()) == item

    scene = SceneId(name="main", uuid=SAMPLE_UUID)
    assert set(scene.to_dict()) == {"sceneName", "sceneUuid"}
    assert SceneId.from_dict(scene.to_dict()) == scene

    transition = CurrentSceneTransitionId(name="fade", uuid=OTHER_UUID)
    assert set(transition.to_dict()) == {
        "currentSceneTransitionName",
        "currentSceneTransitionUuid",
    }
    assert CurrentSceneTransitionId.from_dict(transition.to_dict()) == transition


def test_missing_field_raises():
    with pytest.raises(DecodeError, match="sourceUuid"):
        SourceId.from_dict({"sourceName": "main"})
    with pytest.raises(DecodeError, match="sourceName"):
        SourceId.from_dict({"sourceUuid": str(SAMPLE_UUID)})
    with pytest.raises(DecodeError, match="currentProgramSceneUuid"):
        CurrentProgramSceneId.from_dict({"currentProgramSceneName": "main"})


def test_invalid_uuid_raises():
    with pytest.raises(DecodeError):
        SceneId.from_dict({"sceneName": "main", "sceneUuid": "not-a-uuid"})


def test_invalid_name_type_raises():
    with pytest.raises(DecodeError):
        InputId.from_dict({"inputName": 5, "inputUuid": str(SAMPLE_UUID)})


def test_non_mapping_raises():
    with pytest.raises(DecodeError):
        InputId.from_dict(["inputName"])


def test_extra_keys_are_ignored():
    data = dict(_wire("scene"), sceneIndex=0)
    assert SceneId.from_dict(data) == SceneId(name="main", uuid=SAMPLE_UUID)


def test_default_has_empty_name_and_nil_uuid():
    item = InputId()
    assert item.name == ""
    assert item.uuid == UUID(int=0)


def test_equality_with_name_and_uuid():
    item = InputId(name="media", uuid=SAMPLE_UUID)
    assert item == "media"
    assert "media" == item
    assert item == SAMPLE_UUID
    assert SAMPLE_UUID == item
    assert item != "other"
    assert item != OTHER_UUID


def test_different_kinds_are_not_equal():
    assert SceneId(name="main", uuid=SAMPLE_UUID) != SourceId(
        name="main", uuid=SAMPLE_UUID
    )


def test_same_kind_differs_by_uuid():
    assert SceneId(name="main", uuid=SAMPLE_UUID) != SceneId(
        name="main", uuid=OTHER_UUID
    )


def test_hash_matches_equality():
    ids = {
        SceneId(name="main", uuid=SAMPLE_UUID),
        SceneId(name="main", uuid=SAMPLE_UUID),
        SceneId(name="other", uuid=OTHER_UUID),
    }
    assert len(ids) == 2


@pytest.mark.parametrize(
    "source, target",
    [
        (SceneId, CurrentPreviewSceneId),
        (CurrentPreviewSceneId, SceneId),
        (SceneId, CurrentProgramSceneId),
        (CurrentProgramSceneId, SceneId),
        (CurrentPreviewSceneId, CurrentProgramSceneId),
        (CurrentProgramSceneId, CurrentPreviewSceneId),
        (TransitionId, CurrentSceneTransitionId),
        (CurrentSceneTransitionId, TransitionId),
    ],
)
def test_into_related_kinds(source, target):
    converted = source(name="main", uuid=SAMPLE_UUID).into(target)
    assert type(converted) is target
    assert converted.name == "main"
    assert converted.uuid == SAMPLE_UUID


def test_into_unrelated_kind_raises():
    with pytest.raises(TypeError):
        InputId(name="main", uuid=SAMPLE_UUID).into(SceneId)
    with pytest.raises(TypeError):
        TransitionId(name="main", uuid=SAMPLE_UUID).into(CurrentProgramSceneId)