import pytest

from obwire.errors import DecodeError
from obwire.scene_collections import SceneCollections

LIST = {"currentSceneCollectionName": "main", "sceneCollections": ["main", "other"]}


def test_list():
    collections = SceneCollections.from_dict(LIST)
    assert collections.current == "main"
    other = next(c for c in collections.collections if c != collections.current)
    assert other == "other"


def test_round_trip():
    assert SceneCollections.from_dict(LIST).to_dict() == LIST


def test_missing_current():
    with pytest.raises(DecodeError, match="currentSceneCollectionName"):
        SceneCollections.from_dict({"sceneCollections": []})