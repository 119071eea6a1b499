# Files written from a transformed drawing: coefficient CSV, spectrum plot,
# reconstructions at a few thresholds and a still of the epicycles.
import logging
import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from epicycles import render
from epicycles.dft import frequency_of
from epicycles.evolve import evolve, trace
from epicycles.sinusoids import extract_sinusoids

logger = logging.getLogger(__name__)

COEFFICIENT_COLUMNS = ["k", "freq", "amplitude", "phase", "real", "imag"]


def coefficient_table(coefficients):
    """One row per DFT bin, largest amplitude first (ties keep bin order)."""
    coefficients = np.asarray(list(coefficients), dtype=complex)
    N = len(coefficients)
    if N == 0:
        return pd.DataFrame(columns=COEFFICIENT_COLUMNS)
    df = pd.DataFrame({
        "k": np.arange(N),
        "freq": [frequency_of(k) for k in range(N)],
        "amplitude": np.abs(coefficients) / N,
        "phase": np.angle(coefficients),
        "real": coefficients.real,
        "imag": coefficients.imag,
    })
    return df.sort_values("amplitude", ascending=False, kind="stable").reset_index(drop=True)


def save_coefficients_csv(coefficients, out_path, top=None):
    df = coefficient_table(coefficients)
    if top is not None:
        df = df.head(top)
    out_path = Path(out_path)
    df.to_csv(out_path, index=False)
    logger.info("Saved: %s", out_path)
    return out_path


def _save(fig, out_path):
    out_path = Path(out_path)
    fig.savefig(out_path, bbox_inches="tight", dpi=100)
    plt.close(fig)
    logger.info("Saved: %s", out_path)
    return out_path


def plot_spectrum(coefficients, out_path):
    """Amplitude per signed frequency, log scale."""
    df = coefficient_table(coefficients).sort_values("freq")
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(df["freq"], df["amplitude"], marker=".", linewidth=1)
    if (df["amplitude"] > 0).any():
        ax.set_yscale("log")
    ax.set_title("Amplitude of Fourier coefficients")
    ax.set_xlabel("Frequency")
    ax.set_ylabel("|X_k| / N")
    return _save(fig, out_path)


def plot_reconstruction(points, coefficients, thresholds, out_dir, samples=500):
    """One figure per threshold: original path dashed, traced tip path solid."""
    out_dir = Path(out_dir)
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    written = []
    for threshold in thresholds:
        sinusoids = extract_sinusoids(coefficients, threshold)
        tips = trace(sinusoids, samples)
        fig, ax = plt.subplots(figsize=(6, 6))
        # close both loops so the first and last points are joined
        ax.plot(xs + xs[:1], ys + ys[:1], linestyle="--", linewidth=1)
        ax.plot([p.x for p in tips] + [tips[0].x], [p.y for p in tips] + [tips[0].y], linewidth=1)
        ax.set_aspect("equal")
        ax.invert_yaxis()
        ax.set_title(f"Reconstruction with {len(sinusoids)} epicycles (threshold {threshold:g})")
        written.append(_save(fig, out_dir / f"reconstruction_threshold_{threshold:g}.png"))
    return written


def plot_snapshot(points, sinusoids, t, out_path, settings=None, trail_samples=100):
    """Still of the epicycles at time `t` with the tip path leading up to it."""
    trail = [evolve(sinusoids, t * i / trail_samples).tip for i in range(trail_samples + 1)] if t > 0 else []
    fig, ax = render.new_canvas(settings)
    render.draw_frame(ax, evolve(sinusoids, t), trail, points, settings)
    ax.set_title(f"{len(sinusoids)} epicycles at t={t:.2f} ({t / (2 * math.pi):.0%} of a turn)")
    return _save(fig, out_path)
