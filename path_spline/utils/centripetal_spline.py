# centripetal_spline.py
"""
Catmull-Rom spline through 2D waypoints.
Requires: numpy

The knot spacing is |p_{k+1} - p_k| ** alpha:
  alpha = 0.0  uniform (classical Catmull-Rom)
  alpha = 0.5  centripetal (no cusps/self-loops on uneven spacing)
  alpha = 1.0  chordal

Functions:
  - catmull_rom(points, subdivisions, alpha) -> ndarray (M, 2)
  - compute_curve(points, subdivisions, alpha) -> list of Point
  - to_points(array) -> list of Point
"""

import logging
import numbers
from typing import NamedTuple

import numpy as np

from path_spline.utils.errors import InvalidArgumentError, InvalidGeometryError

logger = logging.getLogger(__name__)

UNIFORM = 0.0
CENTRIPETAL = 0.5
CHORDAL = 1.0

DEFAULT_SUBDIVISIONS = 10
DEFAULT_ALPHA = UNIFORM


class Point(NamedTuple):
    x: float
    y: float


def to_points(array):
    """Convert an Nx2 array-like into a list of Point tuples."""
    return [Point(float(x), float(y)) for x, y in _as_points(array)]


def _check_params(subdivisions, alpha):
    """Validate the sampling parameters and return alpha as a float."""
    if isinstance(subdivisions, bool) or not isinstance(subdivisions, numbers.Integral):
        raise InvalidArgumentError(f"subdivisions must be an integer, got {subdivisions!r}")
    if subdivisions < 1:
        raise InvalidArgumentError(f"subdivisions must be >= 1, got {subdivisions}")
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
        raise InvalidArgumentError(f"alpha must be a real number, got {alpha!r}")
    alpha = float(alpha)
    if not np.isfinite(alpha) or not 0.0 <= alpha <= 1.0:
        raise InvalidArgumentError(f"alpha must be in [0, 1], got {alpha}")
    return alpha


def _as_points(points):
    """Return `points` as a float (N, 2) array, validating shape and values."""
    try:
        P = np.asarray(points, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError("points must be an Nx2 array-like of numbers") from e

    if P.ndim == 1 and P.size == 0:
        return np.zeros((0, 2))
    if P.ndim != 2 or P.shape[1] != 2:
        raise InvalidArgumentError(f"points must be an Nx2 array-like, got shape {P.shape}")
    if not np.all(np.isfinite(P)):
        raise InvalidArgumentError("points must have finite coordinates")
    return P


def _linear_interp(P, subdivisions):
    # subdivisions + 1 samples per segment, both ends included
    tau = np.linspace(0.0, 1.0, subdivisions + 1)[:, None]
    segs = [(1.0 - tau) * P[i] + tau * P[i + 1] for i in range(P.shape[0] - 1)]
    return np.vstack(segs)


def _mirror_endpoints(P):
    """Pad P with the second point reflected through the first and the
    second-to-last point reflected through the last."""
    pre = 2.0 * P[0] - P[1]
    post = 2.0 * P[-1] - P[-2]
    return np.vstack([pre, P, post])


def _segment_lengths(P):
    # hypot avoids the overflow/underflow of squaring huge or tiny coordinates
    return np.hypot(*np.diff(P, axis=0).T)


def _check_finite(pts_pad, seg_len):
    if not (np.all(np.isfinite(pts_pad)) and np.all(np.isfinite(seg_len))):
        logger.debug("catmull_rom: padded points or segment lengths overflow")
        raise InvalidGeometryError(
            "control points are too large to mirror or measure in float64; rescale them")


def _check_distinct(seg_len):
    """seg_len[k] is the distance between control points k and k + 1."""
    coincident = np.flatnonzero(seg_len == 0.0)
    if coincident.size:
        pairs = [(int(i), int(i) + 1) for i in coincident]
        logger.debug("catmull_rom: coincident points at %s", pairs)
        raise InvalidGeometryError(
            f"consecutive control points coincide at indices {pairs}", indices=pairs)


def _sample_window(p0, p1, p2, p3, t0, t1, t2, t3, subdivisions):
    """
    Evaluate one segment p1 -> p2 with three rounds of linear blending
    (Barry-Goldman pyramid) at subdivisions + 1 parameters in [t1, t2].
    """
    t = np.linspace(t1, t2, subdivisions + 1)[:, None]

    # denominators are constant over the window
    d10 = t1 - t0
    d21 = t2 - t1
    d32 = t3 - t2
    d20 = t2 - t0
    d31 = t3 - t1

    A1 = ((t1 - t) * p0 + (t - t0) * p1) / d10
    A2 = ((t2 - t) * p1 + (t - t1) * p2) / d21
    A3 = ((t3 - t) * p2 + (t - t2) * p3) / d32

    B1 = ((t2 - t) * A1 + (t - t0) * A2) / d20
    B2 = ((t3 - t) * A2 + (t - t1) * A3) / d31

    C = ((t2 - t) * B1 + (t - t1) * B2) / d21
    return C


def catmull_rom(points, subdivisions=DEFAULT_SUBDIVISIONS, alpha=DEFAULT_ALPHA):
    """
    Sample a Catmull-Rom spline through the input waypoints.

    Args:
        points: sequence of (x, y) waypoints (Nx2), N >= 0
        subdivisions: samples generated per segment between two waypoints (>= 1)
        alpha: knot exponent in [0, 1] (0 uniform, 0.5 centripetal, 1 chordal)

    Returns:
        Mx2 numpy array of sampled (x, y) points, in order from the first
        waypoint to the last.
          - N < 2: the input points unchanged
          - N in (2, 3): straight segments, (N - 1) * (subdivisions + 1) points
          - N >= 4: (N - 1) * (subdivisions + 1) + 1 points; neighbouring
            segments share their joining sample and the last waypoint is
            appended once more at the end

    Raises:
        InvalidArgumentError: bad subdivisions/alpha or malformed points
        InvalidGeometryError: two consecutive waypoints coincide, or the
            coordinates are too large to evaluate in float64 (N >= 4)
    """
    alpha = _check_params(subdivisions, alpha)
    P = _as_points(points)

    n = P.shape[0]
    if n < 2:
        logger.debug("catmull_rom: %d point(s), nothing to interpolate", n)
        return P.copy()
    if n < 4:
        logger.debug("catmull_rom: %d points, falling back to linear interpolation", n)
        return _linear_interp(P, subdivisions)

    # overflow is detected below, after the fact
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        # pad endpoints so first/last waypoint are interpolated
        pts_pad = _mirror_endpoints(P)
        seg_len = _segment_lengths(pts_pad)
        _check_finite(pts_pad, seg_len)
        # the first and last padded segments mirror the original end segments
        _check_distinct(seg_len[1:-1])

        # knot increments |p_{k+1} - p_k| ** alpha along the padded sequence
        dt = seg_len ** alpha

        curve_pts = []
        for i in range(len(pts_pad) - 3):
            t0 = 0.0
            t1 = t0 + dt[i]
            t2 = t1 + dt[i + 1]
            t3 = t2 + dt[i + 2]
            p0, p1, p2, p3 = pts_pad[i:i + 4]
            curve_pts.append(_sample_window(p0, p1, p2, p3, t0, t1, t2, t3, subdivisions))

    # close the curve exactly on the last waypoint
    curve_pts.append(P[-1:].copy())
    curve = np.vstack(curve_pts)

    if not np.all(np.isfinite(curve)):
        logger.debug("catmull_rom: blending overflowed for alpha=%s", alpha)
        raise InvalidGeometryError(
            "spline evaluation overflowed float64 for these control points; rescale them")

    logger.debug("catmull_rom: %d points, %d segments, alpha=%s -> %d samples",
                 n, len(pts_pad) - 3, alpha, curve.shape[0])
    return curve


def compute_curve(points, subdivisions=DEFAULT_SUBDIVISIONS, alpha=DEFAULT_ALPHA):
    """Same as catmull_rom() but returns a list of Point tuples."""
    return to_points(catmull_rom(points, subdivisions=subdivisions, alpha=alpha))
