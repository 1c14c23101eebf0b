"""Tests for the curve command model and the spiral / leaf builders."""

from __future__ import annotations

import math

import numpy as np
import pytest

from scrollwork.engine.curves import (
    EMPTY_CURVE,
    ClosePath,
    Curve,
    CurveTo,
    MoveTo,
    QuadTo,
    leaf,
    smooth_polyline,
    spiral,
    spiral_points,
    spiral_steps,
)


class TestSpiralSampling:
    def test_one_turn_has_61_points(self):
        pts = spiral_points((0.0, 0.0), 5.0, 1.0, 0.0)
        assert pts.shape == (61, 2)

    def test_minimum_of_six_steps(self):
        assert spiral_steps(0.05) == 6
        assert len(spiral_points((0.0, 0.0), 5.0, 0.05, 0.0)) == 7

    def test_negative_turns_use_magnitude(self):
        assert spiral_steps(-1.5) == 90

    def test_radius_grows_logarithmically(self):
        pts = spiral_points((0.0, 0.0), 5.0, 1.0, 0.0)
        radii = np.hypot(pts[:, 0], pts[:, 1])
        assert radii[0] == pytest.approx(5.0)
        assert radii[-1] == pytest.approx(5.0 * math.exp(0.12 * 2 * math.pi))
        assert np.all(np.diff(radii) > 0)

    def test_rotation_and_center(self):
        pts = spiral_points((10.0, -4.0), 2.0, 1.0, math.pi / 2)
        assert pts[0] == pytest.approx([10.0, -2.0])


class TestSpiralCurve:
    def test_anchor_points_before_smoothing(self):
        curve = spiral((0.0, 0.0), 5.0, 1.0, 0.0)
        assert len(curve.anchor_points()) == 61
        assert isinstance(curve.commands[0], MoveTo)
        assert all(isinstance(c, CurveTo) for c in curve.commands[1:])

    def test_reference_path_prefix(self):
        d = spiral((0.0, 0.0), 5.0, 1.0, 0.0).to_path_data()
        assert d.startswith("M 5.00 0.00 C 5.01 0.12 5.03 0.41 5.04 0.53 C 5.03 0.65 5.02 0.95 5.02 1.07")

    def test_control_points_on_chord(self):
        curve = spiral((3.0, 4.0), 6.0, 0.8, 1.0, smoothing=0.25)
        for prev, seg in zip(curve.anchor_points(), curve.commands[1:]):
            dx, dy = seg.x - prev[0], seg.y - prev[1]
            assert seg.x1 == pytest.approx(prev[0] + dx * 0.25)
            assert seg.y1 == pytest.approx(prev[1] + dy * 0.25)
            assert seg.x2 == pytest.approx(seg.x - dx * 0.25)
            assert seg.y2 == pytest.approx(seg.y - dy * 0.25)

    def test_zero_turns_is_empty_not_error(self):
        curve = spiral((0.0, 0.0), 5.0, 0.0, 0.0)
        assert curve.is_empty
        assert curve == EMPTY_CURVE
        assert curve.to_path_data() == ""

    def test_tiny_sweep_is_empty(self):
        assert spiral((0.0, 0.0), 5.0, 0.01, 0.0).is_empty

    def test_smooth_polyline_needs_two_points(self):
        assert smooth_polyline(np.array([[1.0, 2.0]])).is_empty

    def test_coordinates_are_plain_floats(self):
        curve = spiral((0.0, 0.0), 5.0, 1.0, 0.0)
        assert all(type(v) is float for v in curve.commands[1].__dict__.values())


class TestLeaf:
    def test_tip_and_closure(self):
        curve = leaf((0.0, 0.0), 0.0, 10.0)
        cubic = curve.commands[1]
        assert isinstance(cubic, CurveTo)
        assert cubic.end == (10.0, 0.0)
        assert curve.start == (0.0, 0.0)
        assert curve.end == (0.0, 0.0)

    def test_command_sequence(self):
        curve = leaf((2.0, 3.0), 1.2, 8.0)
        kinds = [type(c) for c in curve.commands]
        assert kinds == [MoveTo, CurveTo, QuadTo]

    def test_control_points(self):
        curve = leaf((0.0, 0.0), 0.0, 10.0)
        cubic = curve.commands[1]
        quad = curve.commands[2]
        assert (cubic.x1, cubic.y1) == pytest.approx((3.5 * math.cos(-0.9), 3.5 * math.sin(-0.9)))
        assert (cubic.x2, cubic.y2) == pytest.approx((3.5 * math.cos(0.9), 3.5 * math.sin(0.9)))
        assert (quad.x1, quad.y1) == pytest.approx((-1.5, 0.0))

    def test_path_text(self):
        d = leaf((0.0, 0.0), 0.0, 10.0).to_path_data()
        assert d == "M 0.00 0.00 C 2.18 -2.74 2.18 2.74 10.00 0.00 Q -1.50 0.00 0.00 0.00"

    def test_pointing_direction(self):
        curve = leaf((5.0, 5.0), math.pi / 2, 4.0)
        assert curve.commands[1].end == pytest.approx((5.0, 9.0))


class TestCurveModel:
    def test_close_path_formatting(self):
        curve = Curve((MoveTo(0.0, 0.0), QuadTo(1.0, 1.0, 2.0, 0.0), ClosePath()))
        assert curve.to_path_data() == "M 0.00 0.00 Q 1.00 1.00 2.00 0.00 Z"
        assert curve.end == (2.0, 0.0)
        assert len(curve) == 3

    def test_precision_is_configurable(self):
        curve = Curve((MoveTo(1.23456, -0.5),))
        assert curve.to_path_data(precision=3) == "M 1.235 -0.500"

    def test_curves_are_immutable_values(self):
        a = leaf((1.0, 1.0), 0.5, 7.0)
        b = leaf((1.0, 1.0), 0.5, 7.0)
        assert a == b
        assert hash(a) == hash(b)
        with pytest.raises(AttributeError):
            a.commands = ()
