"""Tests for pose settings and their project-file persistence."""

import json

import pytest

from rigpose import log
from rigpose.settings import PoseSettings, PoseSettingsManager


@pytest.fixture
def manager():
    PoseSettingsManager._instance = None
    yield PoseSettingsManager.instance()
    PoseSettingsManager._instance = None


def settings_file(project):
    return project / "project_settings" / "pose.json"


class TestPoseSettings:
    def test_defaults(self):
        s = PoseSettings()
        assert (s.driver_passes, s.ik_iterations, s.ik_max_chain_length, s.motion_path_step) == (2, 10, 4, 2)

    def test_from_dict_partial(self):
        s = PoseSettings.from_dict({"ik_iterations": 20})
        assert s.ik_iterations == 20
        assert s.driver_passes == 2

    def test_dict_round_trip(self):
        s = PoseSettings(driver_passes=3, motion_path_step=1)
        assert PoseSettings.from_dict(s.to_dict()) == s

    @pytest.mark.parametrize("field", ["ik_iterations", "ik_max_chain_length", "motion_path_step"])
    def test_rejects_zero(self, field):
        with pytest.raises(ValueError):
            PoseSettings(**{field: 0})

    def test_zero_driver_passes_allowed(self):
        assert PoseSettings(driver_passes=0).driver_passes == 0

    def test_negative_driver_passes(self):
        with pytest.raises(ValueError):
            PoseSettings(driver_passes=-1)


class TestManager:
    def test_singleton(self, manager):
        assert PoseSettingsManager.instance() is manager

    def test_missing_file_gives_defaults(self, manager, tmp_path):
        manager.set_project_path(tmp_path)
        assert manager.settings == PoseSettings()
        assert manager.project_path == tmp_path

    def test_load(self, manager, tmp_path):
        path = settings_file(tmp_path)
        path.parent.mkdir()
        path.write_text(json.dumps({"ik_iterations": 25}), encoding="utf-8")

        manager.set_project_path(tmp_path)
        assert manager.settings.ik_iterations == 25

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"ik_iterations": 0}'])
    def test_bad_file_falls_back(self, manager, tmp_path, content):
        path = settings_file(tmp_path)
        path.parent.mkdir()
        path.write_text(content, encoding="utf-8")

        manager.set_project_path(tmp_path)
        assert manager.settings == PoseSettings()

    def test_save_without_project(self, manager):
        assert manager.save() is False

    def test_update_persists(self, manager, tmp_path):
        manager.set_project_path(tmp_path)
        manager.update(motion_path_step=4)

        assert json.loads(settings_file(tmp_path).read_text(encoding="utf-8"))["motion_path_step"] == 4

        fresh = PoseSettingsManager()
        fresh.set_project_path(tmp_path)
        assert fresh.settings.motion_path_step == 4

    def test_update_rejects_unknown_name(self, manager, tmp_path):
        manager.set_project_path(tmp_path)
        with pytest.raises(ValueError, match="ik_iteration"):
            manager.update(ik_iteration=5)

        assert manager.settings == PoseSettings()
        assert not settings_file(tmp_path).exists()

    def test_load_failure_reported(self, manager, tmp_path):
        path = settings_file(tmp_path)
        path.parent.mkdir()
        path.write_text("{not json", encoding="utf-8")

        received = []
        log.set_callback(lambda level, msg: received.append((level, msg)))
        try:
            manager.set_project_path(tmp_path)
        finally:
            log.set_callback(None)

        assert received[0][0] == "ERROR"
        assert received[0][1].startswith("[PoseSettings] Failed to load")
        assert "JSONDecodeError" in received[0][1]
