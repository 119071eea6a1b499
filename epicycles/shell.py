"""
State of the interactive drawing and the transitions that update it.

Mouse and timer callbacks never mutate anything: each one takes the current
`ShellState` and returns a new one. Sinusoids are only recomputed when a
drawing is finished, ticks just evolve the cached ones.
"""
import logging
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from epicycles.complex_ops import Point, to_complex_samples
from epicycles.dft import transform
from epicycles.evolve import EpicycleFrame, evolve
from epicycles.sinusoids import DEFAULT_THRESHOLD, Sinusoid, extract_sinusoids

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class ShellState:
    input_path: Tuple[Point, ...] = ()
    sinusoids: Tuple[Sinusoid, ...] = ()
    t: float = 0.0
    drawing: bool = False
    trail: Tuple[Point, ...] = ()
    frame: Optional[EpicycleFrame] = None


def recompute_sinusoids(points, threshold=DEFAULT_THRESHOLD):
    # points -> complex samples -> coefficients -> ranked sinusoids
    sinusoids = extract_sinusoids(transform(to_complex_samples(points)), threshold)
    logger.debug("Recomputed %d sinusoids from %d points", len(sinusoids), len(points))
    return tuple(sinusoids)


def initial_state(points, threshold=DEFAULT_THRESHOLD):
    points = tuple(Point(float(x), float(y)) for x, y in points)
    return ShellState(input_path=points, sinusoids=recompute_sinusoids(points, threshold))


def on_pointer_down(state):
    # start a new drawing, throwing away the old one and its trail
    return replace(state, drawing=True, input_path=(), trail=(), frame=None)


def on_pointer_move(state, point, max_points=100):
    if not state.drawing or len(state.input_path) >= max_points:
        return state
    x, y = point
    return replace(state, input_path=state.input_path + (Point(float(x), float(y)),))


def on_pointer_up(state, threshold=DEFAULT_THRESHOLD):
    if not state.drawing:
        return state
    return replace(
        state,
        drawing=False,
        sinusoids=recompute_sinusoids(state.input_path, threshold),
        t=0.0,
        trail=(),
    )


def on_tick(state, dt, trail_length=100):
    """Advance one animation frame by `dt` seconds; frozen while drawing."""
    if state.drawing:
        return state
    frame = evolve(state.sinusoids, state.t)
    trail = (state.trail + (frame.tip,))[-trail_length:] if trail_length > 0 else ()
    return replace(
        state,
        frame=frame,
        trail=trail,
        t=(state.t + dt) % TWO_PI,
    )
