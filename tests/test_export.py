"""Tests for the game-data export document."""

import json

from rigpose.animation import AnimationClip, Easing, Keyframe, Track, TrackProperty
from rigpose.export import EXPORT_VERSION, export_game_data, game_data, save_game_data
from rigpose.rig import Bone


def rig():
    return [
        Bone("hips", None, "Hips", length=0, rotation=-90, x=1, y=2),
        Bone("spine", "hips", "Spine", length=60, rotation=5),
    ]


def clips():
    return [AnimationClip("walk", "Walk Cycle", duration=96, tracks=[
        Track("hips", TrackProperty.Y, [Keyframe(0, 0), Keyframe(12, -5, Easing.EASE_IN)]),
    ])]


class TestGameData:
    def test_meta(self):
        meta = game_data(rig(), clips())["meta"]
        assert meta["version"] == EXPORT_VERSION
        assert meta["fps"] == 24

    def test_skeleton(self):
        skeleton = game_data(rig(), clips())["skeleton"]
        assert skeleton[0] == {
            "name": "Hips",
            "parent": None,
            "transform": {"x": 1.0, "y": 2.0, "rot": -90.0, "len": 0.0},
        }
        assert skeleton[1]["parent"] == "hips"

    def test_animation_keys(self):
        anim = game_data(rig(), clips())["animations"][0]
        assert anim["name"] == "Walk Cycle"
        assert anim["duration"] == 96
        track = anim["tracks"][0]
        assert track["bone"] == "hips"
        assert track["property"] == "y"
        assert track["keys"][1] == {"t": 12.0, "v": -5.0, "curve": "ease-in"}

    def test_text_is_json(self):
        data = json.loads(export_game_data(rig(), clips(), fps=30))
        assert data["meta"]["fps"] == 30
        assert len(data["skeleton"]) == 2

    def test_save(self, tmp_path):
        path = tmp_path / "game.json"
        save_game_data(rig(), clips(), path)
        assert json.loads(path.read_text(encoding="utf-8")) == game_data(rig(), clips())
