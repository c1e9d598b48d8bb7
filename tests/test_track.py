"""Tests for tracks and keyframe interpolation."""

import pytest

from rigpose.animation import Easing, Keyframe, Track, TrackProperty, interpolate


def make_track(*keys, prop=TrackProperty.ROTATION):
    return Track("bone", prop, [Keyframe(*k) for k in keys])


class TestInterpolate:
    def test_no_keyframes(self):
        assert interpolate(make_track(), 3) is None

    def test_single_key(self):
        track = make_track((4, 7))
        assert interpolate(track, 0) == 7
        assert interpolate(track, 4) == 7
        assert interpolate(track, 9) == 7

    def test_before_first(self):
        assert interpolate(make_track((0, 10), (10, 20)), -5) == 10

    def test_after_last(self):
        assert interpolate(make_track((0, 10), (10, 20)), 15) == 20

    def test_linear_midpoint(self):
        assert interpolate(make_track((0, 10), (10, 20)), 5) == pytest.approx(15)

    def test_fractional_frame(self):
        assert interpolate(make_track((0, 0), (4, 8)), 2.5) == pytest.approx(5)

    def test_on_key(self):
        track = make_track((0, 0), (10, 100), (20, 0))
        assert interpolate(track, 10) == pytest.approx(100)

    def test_departure_key_easing(self):
        track = make_track((0, 0, Easing.EASE_IN), (10, 100, Easing.EASE_OUT))
        assert interpolate(track, 5) == pytest.approx(25)

    def test_ease_in_out_segment(self):
        track = make_track((0, 0, Easing.EASE_IN_OUT), (4, 8))
        assert interpolate(track, 1) == pytest.approx(8 * 0.125)
        assert interpolate(track, 2) == pytest.approx(4)

    def test_unsorted_keys(self):
        track = make_track((10, 20), (0, 10))
        assert interpolate(track, 5) == pytest.approx(15)
        assert track.keyframes[0].time == 10

    def test_second_segment(self):
        track = make_track((0, 0), (10, 10), (20, 30))
        assert interpolate(track, 15) == pytest.approx(20)


class TestKeyInsertion:
    def test_insert_sorted(self):
        track = make_track((10, 1)).with_keyframe(0, 2)
        assert [k.time for k in track.keyframes] == [0, 10]

    def test_replaces_same_time(self):
        track = make_track((0, 1), (10, 2)).with_keyframe(10, 5)
        assert [(k.time, k.value) for k in track.keyframes] == [(0, 1), (10, 5)]

    def test_original_untouched(self):
        track = make_track((0, 1))
        track.with_keyframe(0, 9)
        assert track.keyframes[0].value == 1

    def test_remove(self):
        track = make_track((0, 1), (10, 2)).without_keyframe(0)
        assert [k.time for k in track.keyframes] == [10]


class TestTrackProperty:
    def test_variant_has_no_bone_property(self):
        assert TrackProperty.VARIANT.bone_property is None

    def test_numeric_mapping(self):
        assert TrackProperty.X.bone_property.value == "x"


class TestKeyframe:
    def test_handles_from_wire(self):
        key = Keyframe.deserialize({
            "time": 3, "value": 1.5, "easing": "bezier",
            "handleLeft": {"x": -1, "y": 0}, "handleRight": {"x": 1, "y": 2},
        })
        assert key.easing is Easing.BEZIER
        assert key.handle_left == (-1.0, 0.0)
        assert key.serialize()["handleRight"] == {"x": 1.0, "y": 2.0}

    def test_bad_handle(self):
        with pytest.raises(ValueError):
            Keyframe(0, 0, handle_left=(1, 2, 3))
