# Complex helpers used by the DFT.
# Complex values are plain python `complex` numbers (z = x + y*i), exactly like
# the sampled SVG points get stored before they go into a Fourier transform.
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


def add(a, b):
    # componentwise sum, kept as its own step so the DFT reads like the maths
    return complex(a.real + b.real, a.imag + b.imag)


def multiply(a, b):
    # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    return complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def to_complex_samples(points):
    """Turn a sequence of (x, y) points into complex samples, x -> real, y -> imag."""
    return [complex(x, y) for x, y in points]
