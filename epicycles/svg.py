"""
SVG <path> elements as an input path.

The path data is broken into line / quadratic / cubic segments, the requested
number of samples is spread over them in proportion to their arc length, and
the samples are centred and scaled to fit the canvas.
"""
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

import numpy as np

from epicycles.complex_ops import Point

logger = logging.getLogger(__name__)

SVG_NS = "{http://www.w3.org/2000/svg}"

# One command letter, or one number (ints, decimals, signs, exponents).
# Every SVG command letter is matched so unsupported ones fail loudly instead
# of their numbers being read as arguments of the previous command.
_TOKEN_RE = re.compile(r"([MmZzLlHhVvCcQqSsTtAa])|([-+]?\d*\.?\d+(?:[eE][-+]?\d+)?)")

# Number of arguments consumed per repeat of each supported command
_ARG_COUNTS = {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "Q": 4, "Z": 0}

# Points used to estimate the arc length of a curve
_LENGTH_STEPS = 80


def tokenize_path(d):
    """Split path data into command letters and floats."""
    tokens = []
    for cmd, num in _TOKEN_RE.findall(d):
        tokens.append(cmd if cmd else float(num))
    return tokens


def cubic_bezier(p0, p1, p2, p3, t):
    return (1 - t) ** 3 * p0 + 3 * (1 - t) ** 2 * t * p1 + 3 * (1 - t) * t ** 2 * p2 + t ** 3 * p3


def quad_bezier(p0, p1, p2, t):
    return (1 - t) ** 2 * p0 + 2 * (1 - t) * t * p1 + t ** 2 * p2


def iter_segments(d):
    """Yield ('L', p0, p1), ('Q', p0, p1, p2) and ('C', p0, p1, p2, p3) tuples of complex points."""
    tokens = tokenize_path(d)

    cur = 0j
    start = 0j
    i = 0
    while i < len(tokens):
        cmd = tokens[i]
        i += 1
        if not isinstance(cmd, str):
            if i == 1:
                raise ValueError("Path data starts with a number without a command.")
            raise ValueError(f"Unexpected number {cmd} in path data.")
        upper = cmd.upper()
        if upper not in _ARG_COUNTS:
            raise NotImplementedError(f"SVG command {cmd} is not supported.")
        rel = cmd.islower()

        if upper == "Z":
            yield ("L", cur, start)
            cur = start
            continue

        count = _ARG_COUNTS[upper]
        first = True
        # numbers after a command repeat it (L 10 20 30 40 == L 10 20 L 30 40)
        while i + count <= len(tokens) and all(not isinstance(tok, str) for tok in tokens[i:i + count]):
            args = tokens[i:i + count]
            i += count
            base = cur if rel else 0j

            if upper == "M" and first:
                cur = base + complex(args[0], args[1])
                start = cur
            elif upper in ("M", "L"):
                # extra pairs after a move are implicit lines
                new = base + complex(args[0], args[1])
                yield ("L", cur, new)
                cur = new
            elif upper == "H":
                new = complex(cur.real + args[0], cur.imag) if rel else complex(args[0], cur.imag)
                yield ("L", cur, new)
                cur = new
            elif upper == "V":
                new = complex(cur.real, cur.imag + args[0]) if rel else complex(cur.real, args[0])
                yield ("L", cur, new)
                cur = new
            elif upper == "C":
                p1 = base + complex(args[0], args[1])
                p2 = base + complex(args[2], args[3])
                p3 = base + complex(args[4], args[5])
                yield ("C", cur, p1, p2, p3)
                cur = p3
            elif upper == "Q":
                p1 = base + complex(args[0], args[1])
                p2 = base + complex(args[2], args[3])
                yield ("Q", cur, p1, p2)
                cur = p2
            first = False

        if first:
            raise ValueError(f"SVG command {cmd} is missing its {count} arguments.")


def point_on(segment, t):
    kind = segment[0]
    if kind == "L":
        return segment[1] * (1 - t) + segment[2] * t
    if kind == "C":
        return cubic_bezier(*segment[1:], t)
    if kind == "Q":
        return quad_bezier(*segment[1:], t)
    raise ValueError(f"Unknown segment kind {kind!r}")


def segment_length(segment):
    if segment[0] == "L":
        return abs(segment[2] - segment[1])
    # polyline estimate of the curve
    ts = np.linspace(0, 1, _LENGTH_STEPS)
    pts = np.array([point_on(segment, t) for t in ts])
    return float(np.sum(np.abs(np.diff(pts))))


def allocate_samples(lengths, total):
    """Split `total` samples across segments proportionally to their lengths, summing exactly to `total`."""
    lengths = np.asarray(lengths, dtype=float)
    if len(lengths) == 0:
        return []
    length_sum = float(lengths.sum())
    if length_sum == 0:
        # degenerate drawing, spread evenly
        lengths = np.ones_like(lengths)
        length_sum = float(len(lengths))

    counts = [max(1, int(round(total * L / length_sum))) for L in lengths]
    diff = total - sum(counts)
    # extra samples go to the longest segments first, surplus ones come off the shortest
    order = np.argsort(-lengths, kind="stable")
    if diff < 0:
        order = order[::-1]
    while diff != 0:
        changed = False
        for idx in order:
            if diff == 0:
                break
            if diff > 0:
                counts[idx] += 1
                diff -= 1
                changed = True
            elif counts[idx] > 0:
                counts[idx] -= 1
                diff += 1
                changed = True
        if not changed:
            break
    return counts


def sample_segments(segments, total):
    """Sample `total` complex points along the segments, spaced by arc length."""
    if total < 1:
        raise ValueError(f"Need at least one sample, got {total}")
    counts = allocate_samples([segment_length(s) for s in segments], total)
    points = []
    for segment, count in zip(segments, counts):
        for t in np.linspace(0, 1, count, endpoint=False):
            points.append(point_on(segment, t))
    return np.array(points, dtype=complex)


def normalise(z, radius):
    """Centre samples on their mean and scale so the farthest one sits at `radius`."""
    z = np.asarray(z, dtype=complex)
    z = z - np.mean(z)
    extent = np.max(np.abs(z)) if len(z) else 0.0
    if extent > 0:
        z = z * (radius / extent)
    return z


def parse_svg_segments(source):
    """Collect the segments of every <path> in an SVG file path or SVG text."""
    text = str(source)
    if text.lstrip().startswith("<"):
        root = ET.fromstring(text)
    else:
        root = ET.parse(Path(source)).getroot()

    path_elems = root.findall(f".//{SVG_NS}path") + root.findall(".//path")
    if not path_elems:
        raise RuntimeError("No <path> elements found in the SVG.")

    segments = []
    for elem in path_elems:
        d = elem.get("d")
        if d:
            segments.extend(iter_segments(d))
    if not segments:
        raise RuntimeError("No drawable segments extracted from the SVG.")
    return segments


def load_svg_points(source, n_samples=100, radius=200.0):
    """Sample an SVG drawing as `n_samples` canvas points centred on the origin."""
    segments = parse_svg_segments(source)
    z = normalise(sample_segments(segments, n_samples), radius)
    logger.info("Sampled %d points from %d SVG segments", len(z), len(segments))
    return [Point(float(p.real), float(p.imag)) for p in z]
