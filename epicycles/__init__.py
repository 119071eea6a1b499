"""
Fourier epicycles.

A drawing (list of 2D points) is read as complex samples, transformed with a
direct DFT, and turned into rotating circles whose chained tip traces the
drawing again:

    samples = to_complex_samples(points)
    sinusoids = extract_sinusoids(transform(samples), threshold=2.0)
    frame = evolve(sinusoids, t)      # frame.circles, frame.tip
"""

from epicycles.complex_ops import Point, add, multiply, to_complex_samples
from epicycles.dft import frequency_of, transform
from epicycles.evolve import Circle, EpicycleFrame, evolve, trace
from epicycles.sinusoids import Sinusoid, extract_sinusoids

__all__ = [
    'Point',
    'Circle',
    'EpicycleFrame',
    'Sinusoid',
    'add',
    'multiply',
    'to_complex_samples',
    'frequency_of',
    'transform',
    'extract_sinusoids',
    'evolve',
    'trace',
]
