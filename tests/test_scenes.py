from datetime import timedelta
from uuid import UUID

import pytest

from obwire.durations import duration_to_millis
from obwire.errors import DecodeError
from obwire.ids import CurrentPreviewSceneId, CurrentProgramSceneId, SceneId
from obwire.scenes import (
    CurrentPreviewScene,
    CurrentProgramScene,
    Scene,
    Scenes,
    SceneTransitionOverride,
    parse_created_scene_uuid,
    parse_groups,
)

UUID_1 = "01010101-0101-8101-8101-010101010101"
UUID_2 = "02020202-0202-8202-8202-020202020202"
UUID_3 = "03030303-0303-8303-8303-030303030303"

SCENE_LIST = {
    "currentProgramSceneName": "main",
    "currentProgramSceneUuid": UUID_1,
    "currentPreviewSceneName": "other",
    "currentPreviewSceneUuid": UUID_2,
    "scenes": [
        {"sceneName": "main", "sceneUuid": UUID_1, "sceneIndex": 0},
        {"sceneName": "other", "sceneUuid": UUID_2, "sceneIndex": 1},
    ],
}


def test_scene_list():
    scenes = Scenes.from_dict(SCENE_LIST)
    assert scenes.current_program_scene == CurrentProgramSceneId(
        name="main", uuid=UUID(UUID_1)
    )
    assert scenes.current_preview_scene == CurrentPreviewSceneId(
        name="other", uuid=UUID(UUID_2)
    )
    assert [s.index for s in scenes.scenes] == [0, 1]
    assert scenes.scenes[1].id == SceneId(name="other", uuid=UUID(UUID_2))


def test_scene_list_round_trip():
    scenes = Scenes.from_dict(SCENE_LIST)
    assert scenes.to_dict() == SCENE_LIST
    assert Scenes.from_dict(scenes.to_dict()) == scenes


def test_scene_list_without_preview():
    data = {
        "currentProgramSceneName": "main",
        "currentProgramSceneUuid": UUID_1,
        "scenes": [],
    }
    scenes = Scenes.from_dict(data)
    assert scenes.current_preview_scene is None
    assert scenes.current_program_scene == "main"
    assert "currentPreviewSceneName" not in scenes.to_dict()


def test_scene_list_requires_scenes():
    with pytest.raises(DecodeError):
        Scenes.from_dict({"currentProgramSceneName": "main"})


def test_find_other_program_scene():
    scenes = Scenes.from_dict(SCENE_LIST).scenes
    current = CurrentProgramScene.from_dict({"sceneName": "main", "sceneUuid": UUID_1})
    other = next(s for s in scenes if s.id != current.id).id
    assert other.to_dict() == {"sceneName": "other", "sceneUuid": UUID_2}


def test_find_other_preview_scene():
    scenes = Scenes.from_dict(SCENE_LIST).scenes
    current = CurrentPreviewScene.from_dict({"sceneName": "main", "sceneUuid": UUID_2})
    other = next(s for s in scenes if s.id != current.id).id
    assert other.uuid == UUID(UUID_1)


def test_current_program_scene_round_trip():
    data = {"sceneName": "main", "sceneUuid": UUID_1}
    assert CurrentProgramScene.from_dict(data).to_dict() == data


def test_scene_negative_index_rejected():
    with pytest.raises(DecodeError):
        Scene.from_dict({"sceneName": "a", "sceneUuid": UUID_1, "sceneIndex": -1})


def test_groups():
    assert parse_groups({"groups": ["one"]}) == ["one"]


def test_groups_wrong_type():
    with pytest.raises(DecodeError):
        parse_groups({"groups": [1]})


def test_created_scene_uuid():
    assert parse_created_scene_uuid({"sceneUuid": UUID_3}) == UUID(UUID_3)


def test_transition_override():
    override = SceneTransitionOverride.from_dict(
        {"transitionName": "some-transition", "transitionDuration": 500}
    )
    assert override.name == "some-transition"
    assert override.duration == timedelta(milliseconds=500)


def test_transition_override_null_duration():
    override = SceneTransitionOverride.from_dict({"transitionDuration": None})
    assert override.name is None
    assert override.duration is None


def test_transition_override_duration_required():
    with pytest.raises(DecodeError, match="missing field `transitionDuration`"):
        SceneTransitionOverride.from_dict({"transitionName": "x"})


def test_transition_override_encode():
    override = SceneTransitionOverride(
        name="OBWS-TEST-Transition", duration=timedelta(seconds=5)
    )
    assert override.to_dict() == {
        "transitionName": "OBWS-TEST-Transition",
        "transitionDuration": 5000,
    }
    assert duration_to_millis(override.duration) == 5000