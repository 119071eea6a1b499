# The preset shape shown on start-up.
from epicycles.complex_ops import Point

# Diamond-ish octagon in canvas coordinates (origin at the canvas centre, y down)
PRESET_POINTS = (
    Point(0.0, 0.0),
    Point(50.0, 50.0),
    Point(100.0, 0.0),
    Point(50.0, -50.0),
    Point(0.0, -100.0),
    Point(-50.0, -50.0),
    Point(-100.0, 0.0),
    Point(-50.0, 50.0),
)


def preset_points():
    return list(PRESET_POINTS)

