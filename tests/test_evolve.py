"""Tests for the epicycle chain."""

import math

import pytest

from epicycles.complex_ops import Point, to_complex_samples
from epicycles.dft import transform
from epicycles.evolve import Circle, EpicycleFrame, evolve, trace
from epicycles.paths import preset_points
from epicycles.sinusoids import Sinusoid, extract_sinusoids


def _max_error(points, sinusoids):
    N = len(points)
    errors = []
    for n, p in enumerate(points):
        tip = evolve(sinusoids, 2 * math.pi * n / N).tip
        errors.append(math.hypot(tip.x - p.x, tip.y - p.y))
    return max(errors)


def _rms_error(points, sinusoids):
    N = len(points)
    total = 0.0
    for n, p in enumerate(points):
        tip = evolve(sinusoids, 2 * math.pi * n / N).tip
        total += (tip.x - p.x) ** 2 + (tip.y - p.y) ** 2
    return math.sqrt(total / N)


def test_empty_sinusoids_give_empty_frame():
    frame = evolve([], 1.234)
    assert frame == EpicycleFrame(circles=(), tip=Point(0.0, 0.0))
    assert frame.circles == ()
    assert frame.tip.x == 0 and frame.tip.y == 0


def test_single_arm():
    frame = evolve([Sinusoid(freq=1, amp=2.0, phase=0.0)], math.pi / 2)
    assert frame.circles == (Circle(0.0, 0.0, 2.0),)
    assert frame.tip.x == pytest.approx(0.0, abs=1e-12)
    assert frame.tip.y == pytest.approx(2.0)


def test_circles_sit_on_previous_arm():
    sinusoids = [
        Sinusoid(freq=0, amp=3.0, phase=0.0),
        Sinusoid(freq=2, amp=1.0, phase=math.pi / 2),
    ]
    frame = evolve(sinusoids, 0.0)
    assert frame.circles[0] == Circle(0.0, 0.0, 3.0)
    assert frame.circles[1].x == pytest.approx(3.0)
    assert frame.circles[1].y == pytest.approx(0.0)
    assert frame.circles[1].radius == 1.0
    assert frame.tip.x == pytest.approx(3.0)
    assert frame.tip.y == pytest.approx(1.0)


def test_unit_square_first_circle(unit_square):
    coeffs = transform(to_complex_samples(unit_square))
    frame = evolve(extract_sinusoids(coeffs, threshold=0), 0.0)
    first = frame.circles[0]
    assert (first.x, first.y) == (0.0, 0.0)
    assert first.radius == pytest.approx(abs(coeffs[0]) / 4)
    assert first.radius == pytest.approx(math.sqrt(2) / 2)


def test_round_trip_hits_every_vertex():
    points = preset_points()
    sinusoids = extract_sinusoids(transform(to_complex_samples(points)), threshold=0)
    assert _max_error(points, sinusoids) < 1e-9


def test_error_shrinks_as_threshold_drops():
    points = preset_points()
    coeffs = transform(to_complex_samples(points))
    # the rms error only counts the dropped arms, so it can only shrink
    errors = [_rms_error(points, extract_sinusoids(coeffs, t)) for t in (40.0, 10.0, 0.0)]
    assert errors[0] >= errors[1] >= errors[2]
    assert errors[2] < 1e-9


def test_trace_samples_one_turn():
    sinusoids = [Sinusoid(freq=1, amp=1.0, phase=0.0)]
    tips = trace(sinusoids, 4)
    expected = [(1, 0), (0, 1), (-1, 0), (0, -1)]
    for tip, (x, y) in zip(tips, expected):
        assert tip.x == pytest.approx(x, abs=1e-12)
        assert tip.y == pytest.approx(y, abs=1e-12)


def test_trace_rejects_zero_samples():
    with pytest.raises(ValueError):
        trace([], 0)
