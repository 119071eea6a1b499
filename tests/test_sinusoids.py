"""Tests for turning coefficients into ranked sinusoids."""

import math

import numpy as np
import pytest

from epicycles.complex_ops import to_complex_samples
from epicycles.dft import transform
from epicycles.paths import preset_points
from epicycles.sinusoids import DEFAULT_THRESHOLD, Sinusoid, extract_sinusoids


@pytest.fixture
def preset_coefficients():
    return transform(to_complex_samples(preset_points()))


def test_amplitude_is_normalised_and_phase_is_angle():
    (s,) = extract_sinusoids([complex(0.0, 8.0)], threshold=0)
    assert s == Sinusoid(freq=0, amp=8.0, phase=pytest.approx(math.pi / 2))


def test_sorted_descending(preset_coefficients):
    sinusoids = extract_sinusoids(preset_coefficients, threshold=0)
    assert len(sinusoids) == len(preset_coefficients)
    for a, b in zip(sinusoids, sinusoids[1:]):
        assert a.amp >= b.amp


def test_threshold_filters(preset_coefficients):
    for s in extract_sinusoids(preset_coefficients, threshold=10.0):
        assert s.amp >= 10.0


def test_threshold_monotonicity(preset_coefficients):
    counts = [len(extract_sinusoids(preset_coefficients, t)) for t in (0.0, 1.0, 2.0, 10.0, 30.0, 1e6)]
    assert counts == sorted(counts, reverse=True)
    assert counts[-1] == 0


def test_threshold_is_inclusive():
    # amp is exactly 2.0
    assert len(extract_sinusoids([complex(4.0, 0.0), 0j], threshold=2.0)) == 1


def test_ties_keep_bin_order():
    # N=4, three equal amplitudes of 1.0 and one smaller
    coeffs = [complex(4, 0), complex(0, 4), complex(-4, 0), complex(1, 0)]
    sinusoids = extract_sinusoids(coeffs, threshold=0)
    assert [s.freq for s in sinusoids] == [0, -1, 1, -2]


def test_default_threshold():
    assert DEFAULT_THRESHOLD == 2.0
    # amp 1.5 < 2.0
    assert extract_sinusoids([complex(3.0, 0.0), 0j]) == []


def test_empty_coefficients():
    assert extract_sinusoids([]) == []


def test_phase_range(preset_coefficients):
    for s in extract_sinusoids(preset_coefficients, threshold=0):
        assert -math.pi < s.phase <= math.pi
        assert np.isfinite(s.amp)
