"""
Epicycles CLI
=============

    epicycles animate                      # preset shape, draw your own with the mouse
    epicycles animate --svg thistle.svg
    epicycles snapshot --t 1.5 -o epicycles.png
    epicycles spectrum --svg thistle.svg
    epicycles coefficients --top 50
    epicycles reconstruct --thresholds 20 5 0
"""

import argparse
import logging
import math
import sys
from pathlib import Path

from epicycles.complex_ops import to_complex_samples
from epicycles.config import settings as default_settings
from epicycles.dft import transform
from epicycles.paths import preset_points
from epicycles.sinusoids import extract_sinusoids
from epicycles.svg import load_svg_points

logger = logging.getLogger(__name__)


def _add_common(parser):
    parser.add_argument("--svg", type=Path, help="SVG file whose <path> elements replace the preset shape")
    parser.add_argument("--samples", type=int, help="points sampled from the SVG")
    parser.add_argument("--threshold", type=float, help="smallest epicycle radius kept")
    parser.add_argument("--output-dir", type=Path, help="where output files are written")
    parser.add_argument("--log-level", help="logging level (debug, info, warning, ...)")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="epicycles",
        description="Fourier epicycles tracing a preset, freehand or SVG path",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("animate", help="interactive window, drag to draw a new path")
    _add_common(p)

    p = sub.add_parser("snapshot", help="PNG of the epicycles at one instant")
    _add_common(p)
    p.add_argument("--t", type=float, default=math.pi / 2, help="time in radians, one turn is 2*pi")
    p.add_argument("-o", "--output", default="epicycles_snapshot.png")

    p = sub.add_parser("spectrum", help="PNG of amplitude per frequency")
    _add_common(p)
    p.add_argument("-o", "--output", default="fourier_amplitude_spectrum.png")

    p = sub.add_parser("coefficients", help="CSV of the DFT coefficients")
    _add_common(p)
    p.add_argument("--top", type=int, help="only the N largest coefficients")
    p.add_argument("-o", "--output", default="coefficients.csv")

    p = sub.add_parser("reconstruct", help="PNGs of the traced path at several thresholds")
    _add_common(p)
    p.add_argument("--thresholds", type=float, nargs="+", default=[20.0, 5.0, 0.0])

    return parser


def _settings_from_args(args):
    # only flags the user actually passed override the environment
    update = {}
    if args.threshold is not None:
        update["threshold"] = args.threshold
    if args.samples is not None:
        update["svg_samples"] = args.samples
    if args.output_dir is not None:
        update["output_dir"] = str(args.output_dir)
    if args.log_level is not None:
        update["log_level"] = args.log_level
    return default_settings.model_copy(update=update)


def _load_points(args, settings, parser):
    if args.svg is None:
        return preset_points()
    if not args.svg.exists():
        parser.error(f"SVG file not found: {args.svg}")
    return load_svg_points(args.svg, n_samples=settings.svg_samples, radius=settings.svg_radius)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = _settings_from_args(args)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        return _run(args, settings, parser)
    except (ValueError, NotImplementedError, RuntimeError):
        logger.exception("Could not process %s", args.svg or "the preset shape")
        raise


def _run(args, settings, parser):
    points = _load_points(args, settings, parser)

    if args.command == "animate":
        from epicycles.animate import run
        run(points, settings)
        return 0

    # the non-interactive commands only write files
    import matplotlib
    matplotlib.use("Agg")
    from epicycles import export

    out_dir = Path(settings.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    coefficients = transform(to_complex_samples(points))

    if args.command == "snapshot":
        sinusoids = extract_sinusoids(coefficients, settings.threshold)
        export.plot_snapshot(points, sinusoids, args.t, out_dir / args.output, settings)
    elif args.command == "spectrum":
        export.plot_spectrum(coefficients, out_dir / args.output)
    elif args.command == "coefficients":
        export.save_coefficients_csv(coefficients, out_dir / args.output, top=args.top)
        print(export.coefficient_table(coefficients).head(10).to_string(index=False))
    elif args.command == "reconstruct":
        export.plot_reconstruction(points, coefficients, args.thresholds, out_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
