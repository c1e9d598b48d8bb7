"""Tests for rotation normalization and clamping."""

import pytest

from rigpose.rig import Bone, Constraint, ConstraintType, clamp_rotation, constrained_rotation, normalize_rotation


class TestNormalize:
    @pytest.mark.parametrize("raw, expected", [
        (0, 0),
        (200, -160),
        (-200, 160),
        (540, 180),
        (720, 0),
        (180, 180),
        (-180, 180),
        (-179.5, -179.5),
    ])
    def test_range(self, raw, expected):
        assert normalize_rotation(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", [1e12 + 0.5, -1e12, 1e17, -1e300])
    def test_huge_values_stay_in_range(self, raw):
        assert -180 < normalize_rotation(raw) <= 180

    def test_huge_value_keeps_remainder(self):
        assert normalize_rotation(360.0 * 1e9 + 30) == pytest.approx(30)


class TestClamp:
    def test_below_min_after_normalizing(self):
        assert clamp_rotation(200, -10, 130) == -10

    def test_above_max(self):
        assert clamp_rotation(140, -10, 130) == 130

    def test_inside(self):
        assert clamp_rotation(45, -10, 130) == 45

    def test_huge_rotation_clamped(self):
        assert -10 <= clamp_rotation(1e17, -10, 130) <= 130

    def test_open_bounds(self):
        assert clamp_rotation(170, None, 10) == 10
        assert clamp_rotation(-170, -10, None) == -10
        assert clamp_rotation(-170) == -170


class TestConstrainedRotation:
    def test_uses_first_limit(self):
        bone = Bone("b", rotation=50, constraints=[
            Constraint("p", ConstraintType.IK_POLE),
            Constraint("l1", ConstraintType.LIMIT_ROTATION, min=0, max=20),
            Constraint("l2", ConstraintType.LIMIT_ROTATION, min=0, max=40),
        ])
        assert constrained_rotation(bone) == 20

    def test_influence_does_not_blend(self):
        bone = Bone("b", rotation=50, constraints=[
            Constraint("l", ConstraintType.LIMIT_ROTATION, min=0, max=20, influence=0.0),
        ])
        assert constrained_rotation(bone) == 20

    def test_override_value(self):
        bone = Bone("b", rotation=0, constraints=[
            Constraint("l", ConstraintType.LIMIT_ROTATION, min=-5, max=5),
        ])
        assert constrained_rotation(bone, 30) == 5
