"""
Ranking of DFT coefficients as rotating arms.

Each coefficient X_k becomes a sinusoid with amplitude |X_k| / N (the division
normalises the transform back to the size of the original drawing) and phase
atan2(imag, real). Tiny components are dropped and the rest sorted biggest
first, so the largest circle sits at the root of the epicycle chain.
"""
import logging
import math
from typing import NamedTuple

from epicycles.dft import frequency_of

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 2.0


class Sinusoid(NamedTuple):
    freq: int
    amp: float
    phase: float


def extract_sinusoids(coefficients, threshold=DEFAULT_THRESHOLD):
    """Convert coefficients to sinusoids with ``amp >= threshold``, sorted by amplitude.

    Parameters
    ----------
    coefficients : sequence of complex
        Output of :func:`epicycles.dft.transform`, bin ``k`` at index ``k``.
    threshold : float
        Smallest amplitude kept. Lower values keep more (smaller) circles.

    Returns
    -------
    list of Sinusoid
        Descending by ``amp``. Equal amplitudes keep bin order
        (frequencies 0, -1, 1, -2, ...), since ``sorted`` is stable.
    """
    coefficients = list(coefficients)
    N = len(coefficients)
    sinusoids = [
        Sinusoid(
            freq=frequency_of(k),
            amp=math.hypot(X.real, X.imag) / N,
            phase=math.atan2(X.imag, X.real),
        )
        for k, X in enumerate(coefficients)
    ]
    kept = [s for s in sinusoids if s.amp >= threshold]
    logger.debug("Kept %d / %d sinusoids at threshold %g", len(kept), N, threshold)
    return sorted(kept, key=lambda s: s.amp, reverse=True)
