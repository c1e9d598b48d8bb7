"""
Pose settings: pipeline-level configuration.

Holds the fixed budgets of the pose pipeline (driver passes, IK iterations,
IK chain length, motion path sampling step).
Settings are saved to project_settings/pose.json.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rigpose import log


@dataclass
class PoseSettings:
    """
    Pipeline budgets.

    Defaults: two driver passes, ten CCD
    iterations over at most four bones, motion paths sampled every two frames.
    """

    driver_passes: int = 2
    ik_iterations: int = 10
    ik_max_chain_length: int = 4
    motion_path_step: int = 2

    def __post_init__(self):
        if self.driver_passes < 0:
            raise ValueError("driver_passes must be >= 0")
        if self.ik_iterations < 1:
            raise ValueError("ik_iterations must be >= 1")
        if self.ik_max_chain_length < 1:
            raise ValueError("ik_max_chain_length must be >= 1")
        if self.motion_path_step < 1:
            raise ValueError("motion_path_step must be >= 1")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "driver_passes": self.driver_passes,
            "ik_iterations": self.ik_iterations,
            "ik_max_chain_length": self.ik_max_chain_length,
            "motion_path_step": self.motion_path_step,
        }

    @staticmethod
    def from_dict(data: dict) -> "PoseSettings":
        """Deserialize from dictionary. Missing keys keep their defaults."""
        defaults = PoseSettings()
        return PoseSettings(
            driver_passes=int(data.get("driver_passes", defaults.driver_passes)),
            ik_iterations=int(data.get("ik_iterations", defaults.ik_iterations)),
            ik_max_chain_length=int(data.get("ik_max_chain_length", defaults.ik_max_chain_length)),
            motion_path_step=int(data.get("motion_path_step", defaults.motion_path_step)),
        )


class PoseSettingsManager:
    """
    Singleton manager for pose settings.

    Handles loading/saving settings from project directory.
    """

    _instance: Optional["PoseSettingsManager"] = None
    _settings: PoseSettings
    _project_path: Optional[Path] = None

    def __init__(self) -> None:
        self._settings = PoseSettings()
        self._project_path = None

    @classmethod
    def instance(cls) -> "PoseSettingsManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = PoseSettingsManager()
        return cls._instance

    @property
    def settings(self) -> PoseSettings:
        """Get current pose settings."""
        return self._settings

    @property
    def project_path(self) -> Optional[Path]:
        """Get current project path."""
        return self._project_path

    def set_project_path(self, path: Path | str) -> None:
        """Set project path and load settings."""
        self._project_path = Path(path)
        self._load()

    def _get_settings_path(self) -> Optional[Path]:
        """Get path to settings file."""
        if self._project_path is None:
            return None
        return self._project_path / "project_settings" / "pose.json"

    def _load(self) -> None:
        """Load settings from file, falling back to defaults."""
        path = self._get_settings_path()
        if path is None or not path.exists():
            self._settings = PoseSettings()
            return

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = PoseSettings.from_dict(data)
            log.info(f"[PoseSettings] Loaded from {path}")
        except (OSError, ValueError, TypeError, AttributeError) as e:
            log.error(e, f"[PoseSettings] Failed to load {path}")
            self._settings = PoseSettings()

    def save(self) -> bool:
        """Save settings to file."""
        path = self._get_settings_path()
        if path is None:
            log.error("[PoseSettings] No project path set, cannot save")
            return False

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            log.info(f"[PoseSettings] Saved to {path}")
            return True
        except OSError as e:
            log.error(e, f"[PoseSettings] Failed to save {path}")
            return False

    def update(self, **changes) -> PoseSettings:
        """
        Replace individual settings, save, and return the new settings.

        Raises ValueError for names PoseSettings does not have.
        """
        data = self._settings.to_dict()
        unknown = sorted(set(changes) - set(data))
        if unknown:
            raise ValueError(f"Unknown pose settings: {', '.join(unknown)}")
        data.update(changes)
        self._settings = PoseSettings.from_dict(data)
        self.save()
        return self._settings
