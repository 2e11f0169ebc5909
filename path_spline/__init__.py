"""Catmull-Rom path smoothing for 2D waypoints."""

from path_spline.utils.centripetal_spline import (
    CENTRIPETAL,
    CHORDAL,
    DEFAULT_ALPHA,
    DEFAULT_SUBDIVISIONS,
    UNIFORM,
    Point,
    catmull_rom,
    compute_curve,
    to_points,
)
from path_spline.utils.errors import InvalidArgumentError, InvalidGeometryError, SplineError
from path_spline.utils.point_conversion import (
    LEGACY_ALPHA,
    LEGACY_SUBDIVISIONS,
    catmull_rom_flat,
    flatten_points,
    unflatten_points,
)

__all__ = [
    'CENTRIPETAL',
    'CHORDAL',
    'DEFAULT_ALPHA',
    'DEFAULT_SUBDIVISIONS',
    'LEGACY_ALPHA',
    'LEGACY_SUBDIVISIONS',
    'UNIFORM',
    'InvalidArgumentError',
    'InvalidGeometryError',
    'Point',
    'SplineError',
    'catmull_rom',
    'catmull_rom_flat',
    'compute_curve',
    'flatten_points',
    'to_points',
    'unflatten_points',
]
