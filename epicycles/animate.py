"""
Interactive epicycle window.

Press and drag the mouse to draw a new path; on release the drawing is
transformed and the epicycles start tracing it. A matplotlib timer drives the
animation and the wall-clock time between two frames is the step in `t`.
"""
import logging
import time

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from epicycles import render, shell
from epicycles.config import settings as default_settings

logger = logging.getLogger(__name__)


class EpicycleAnimator:
    def __init__(self, points, settings=None):
        self.settings = settings or default_settings
        self.state = shell.initial_state(points, self.settings.threshold)
        self.fig, self.ax = render.new_canvas(self.settings)
        self._last_tick = None
        self.anim = None

        canvas = self.fig.canvas
        canvas.mpl_connect("button_press_event", self.on_press)
        canvas.mpl_connect("motion_notify_event", self.on_motion)
        canvas.mpl_connect("button_release_event", self.on_release)

    def on_press(self, event):
        if event.inaxes is not self.ax:
            return
        self.state = shell.on_pointer_down(self.state)

    def on_motion(self, event):
        if event.inaxes is not self.ax or event.xdata is None:
            return
        self.state = shell.on_pointer_move(
            self.state, (event.xdata, event.ydata), self.settings.max_input_points
        )

    def on_release(self, event):
        if not self.state.drawing:
            return
        self.state = shell.on_pointer_up(self.state, self.settings.threshold)
        logger.info(
            "New drawing: %d points, %d epicycles",
            len(self.state.input_path), len(self.state.sinusoids),
        )

    def step(self, dt):
        self.state = shell.on_tick(self.state, dt, self.settings.trail_length)
        render.draw_frame(
            self.ax,
            None if self.state.drawing else self.state.frame,
            self.state.trail,
            self.state.input_path,
            self.settings,
        )

    def _animate(self, _frame_idx):
        now = time.perf_counter()
        dt = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now
        self.step(dt)
        return []

    def start(self):
        self.anim = FuncAnimation(
            self.fig, self._animate, interval=self.settings.interval_ms, cache_frame_data=False
        )
        return self.anim


def run(points, settings=None):
    animator = EpicycleAnimator(points, settings)
    animator.start()
    logger.info("Showing %d epicycles", len(animator.state.sinusoids))
    plt.show()
    return animator
