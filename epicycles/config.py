"""Settings read from EPICYCLES_* environment variables (or a .env file)."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Smallest sinusoid amplitude kept, in canvas pixels
    threshold: float = 2.0

    # Freehand drawings stop recording after this many points
    max_input_points: int = 100
    # Number of recent tip positions drawn as the trail
    trail_length: int = 100

    # SVG sampling: number of points and radius of the normalised shape
    svg_samples: int = 100
    svg_radius: float = 200.0

    # Window
    canvas_size: int = 600
    interval_ms: int = 16

    output_dir: str = "."
    log_level: str = "info"

    # Colours
    circle_color: str = "#777"
    arm_color: str = "#ccc"
    tip_color: str = "#0f0"
    trail_color: str = "#666"
    point_color: str = "#f00"
    background_color: str = "white"

    model_config = {
        "env_prefix": "EPICYCLES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
