# Drawing of one epicycle frame with matplotlib.
# Everything is redrawn from scratch each frame: input points (red dots), the
# circles, the arms joining their centres, the tip and the trail behind it.
import matplotlib.pyplot as plt
from matplotlib.patches import Circle as CirclePatch

from epicycles.config import settings as default_settings

# drawn sizes, in canvas units
TIP_RADIUS = 3.0
POINT_RADIUS = 1.0


def setup_axes(ax, settings=None):
    """Canvas-like axes: origin in the centre, y pointing down, no ticks."""
    settings = settings or default_settings
    half = settings.canvas_size / 2
    ax.set_xlim(-half, half)
    ax.set_ylim(-half, half)
    ax.invert_yaxis()
    ax.set_aspect("equal")
    ax.set_facecolor(settings.background_color)
    ax.get_xaxis().set_visible(False)
    ax.get_yaxis().set_visible(False)
    for side in ["top", "right", "bottom", "left"]:
        ax.spines[side].set_visible(False)


def draw_points(ax, points, settings):
    for x, y in points:
        ax.add_patch(CirclePatch((x, y), POINT_RADIUS, color=settings.point_color))


def draw_epicycles(ax, frame, settings):
    prev = None
    for circle in frame.circles:
        ax.add_patch(CirclePatch((circle.x, circle.y), circle.radius,
                                 fill=False, edgecolor=settings.circle_color, linewidth=0.8))
        if prev is not None:
            ax.plot([prev.x, circle.x], [prev.y, circle.y], color=settings.arm_color, linewidth=1)
        prev = circle

    # last arm reaches from the outermost centre to the tip; a frame with no
    # circles has no arm to draw
    if prev is not None:
        ax.plot([prev.x, frame.tip.x], [prev.y, frame.tip.y], color=settings.arm_color, linewidth=1)

    ax.add_patch(CirclePatch((frame.tip.x, frame.tip.y), TIP_RADIUS, color=settings.tip_color))


def draw_trail(ax, trail, settings):
    if len(trail) < 2:
        return
    ax.plot([p.x for p in trail], [p.y for p in trail], color=settings.trail_color, linewidth=1)


def draw_frame(ax, frame, trail=(), points=(), settings=None):
    settings = settings or default_settings
    ax.clear()
    setup_axes(ax, settings)
    draw_points(ax, points, settings)
    if frame is not None:
        draw_epicycles(ax, frame, settings)
        draw_trail(ax, trail, settings)


def new_canvas(settings=None):
    settings = settings or default_settings
    # 100 dpi so one canvas unit is roughly one pixel
    fig, ax = plt.subplots(figsize=(settings.canvas_size / 100, settings.canvas_size / 100), dpi=100)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    fig.patch.set_facecolor(settings.background_color)
    setup_axes(ax, settings)
    return fig, ax
