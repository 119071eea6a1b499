"""
Discrete Fourier transform over complex samples.

Output bin k holds frequency `frequency_of(k)`, so the bins come out as
0, -1, 1, -2, 2, ... instead of numpy's 0..N/2, -N/2..-1 layout. Bins with the
same amplitude later keep this interleaved order when they get ranked.
"""
import math

from epicycles.complex_ops import add, multiply


def frequency_of(k):
    #    k:  0  1  2  3  4  5  6 ...
    # f(k):  0 -1  1 -2  2 -3  3 ...
    if k < 0:
        raise ValueError(f"bin index must be non-negative, got {k}")
    sign = 1 if k % 2 == 0 else -1
    return sign * ((k + 1) // 2)


def transform(samples):
    """Direct O(N^2) DFT of `samples`, one coefficient per sample."""
    samples = list(samples)
    N = len(samples)
    coefficients = []
    for k in range(N):
        freq = frequency_of(k)
        X = complex(0.0, 0.0)
        for n, x in enumerate(samples):
            phi = 2 * math.pi * freq * n / N
            X = add(X, multiply(x, complex(math.cos(phi), -math.sin(phi))))
        coefficients.append(X)
    return coefficients
