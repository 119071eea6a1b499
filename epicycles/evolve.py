# Epicycle chain at a given time.
# The arms are added one after another, each circle sitting on the tip of the
# previous one. Every intermediate centre is kept because that is what gets
# drawn; the last cursor position is the tip tracing the drawing.
import math
from typing import NamedTuple, Tuple

from epicycles.complex_ops import Point


class Circle(NamedTuple):
    x: float
    y: float
    radius: float


class EpicycleFrame(NamedTuple):
    circles: Tuple[Circle, ...]
    tip: Point


def evolve(sinusoids, t):
    circles = []
    x = 0.0
    y = 0.0
    for s in sinusoids:
        circles.append(Circle(x, y, s.amp))
        angle = s.freq * t + s.phase
        x += s.amp * math.cos(angle)
        y += s.amp * math.sin(angle)
    return EpicycleFrame(circles=tuple(circles), tip=Point(x, y))


def trace(sinusoids, samples):
    """Tip positions at ``samples`` evenly spaced times over one full turn [0, 2*pi)."""
    if samples < 1:
        raise ValueError(f"samples must be at least 1, got {samples}")
    sinusoids = list(sinusoids)
    return [evolve(sinusoids, 2 * math.pi * i / samples).tip for i in range(samples)]
