# point_conversion.py
"""
Conversions between point layouts, for callers that keep coordinates in a
flat [x0, y0, x1, y1, ...] array instead of (x, y) pairs.

Functions:
  - flatten_points(points) -> ndarray (2N,)
  - unflatten_points(flat) -> ndarray (N, 2)
  - catmull_rom_flat(flat, subdivisions, alpha) -> ndarray (2M,)
"""

import logging

import numpy as np

from path_spline.utils.centripetal_spline import CENTRIPETAL, _as_points, catmull_rom
from path_spline.utils.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

LEGACY_SUBDIVISIONS = 16
LEGACY_ALPHA = CENTRIPETAL


def flatten_points(points):
    """(N, 2) points -> flat float array [x0, y0, x1, y1, ...]."""
    return _as_points(points).reshape(-1).copy()


def unflatten_points(flat):
    """Flat [x0, y0, x1, y1, ...] -> (N, 2) float array."""
    try:
        F = np.asarray(flat, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError("flat coordinates must be numbers") from e
    if F.ndim != 1:
        raise InvalidArgumentError(f"flat coordinates must be 1-D, got shape {F.shape}")
    if F.size % 2 != 0:
        raise InvalidArgumentError(f"flat coordinates need an even length, got {F.size}")
    return F.reshape(-1, 2).copy()


def catmull_rom_flat(flat, subdivisions=LEGACY_SUBDIVISIONS, alpha=LEGACY_ALPHA):
    """
    catmull_rom() for flat coordinate arrays.

    Defaults match the older flat-array caller: 16 subdivisions, centripetal.
    """
    pts = unflatten_points(flat)
    logger.debug("catmull_rom_flat: %d coordinates -> %d points", 2 * len(pts), len(pts))
    return flatten_points(catmull_rom(pts, subdivisions=subdivisions, alpha=alpha))
