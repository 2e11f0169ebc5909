import numpy as np
import pytest

from path_spline.utils.centripetal_spline import Point, catmull_rom, to_points
from path_spline.utils.errors import InvalidArgumentError
from path_spline.utils.point_conversion import (
    LEGACY_ALPHA,
    LEGACY_SUBDIVISIONS,
    catmull_rom_flat,
    flatten_points,
    unflatten_points,
)


def test_flatten_and_unflatten():
    flat = flatten_points([(1.0, 2.0), (3.0, 4.0)])
    np.testing.assert_array_equal(flat, [1.0, 2.0, 3.0, 4.0])

    pts = unflatten_points([1, 2, 3, 4, 5, 6])
    assert pts.shape == (3, 2)
    np.testing.assert_array_equal(pts[2], [5.0, 6.0])


def test_empty_layouts():
    assert flatten_points([]).shape == (0,)
    assert unflatten_points([]).shape == (0, 2)


@pytest.mark.parametrize("flat", [[1.0, 2.0, 3.0], [[1.0, 2.0]], ["x", "y"]])
def test_unflatten_rejects_bad_input(flat):
    with pytest.raises(InvalidArgumentError):
        unflatten_points(flat)


def test_to_points():
    pts = to_points(np.array([[0.5, 1.0], [2.0, -1.0]]))
    assert pts == [Point(0.5, 1.0), Point(2.0, -1.0)]
    assert pts[1].y == -1.0


def test_flat_entry_point_defaults(waypoints):
    flat = flatten_points(waypoints)
    out = catmull_rom_flat(flat)

    n = len(waypoints)
    assert out.shape == (2 * ((n - 1) * (LEGACY_SUBDIVISIONS + 1) + 1),)
    expected = catmull_rom(waypoints, subdivisions=LEGACY_SUBDIVISIONS, alpha=LEGACY_ALPHA)
    np.testing.assert_allclose(unflatten_points(out), expected)
    np.testing.assert_array_equal(out[-2:], flat[-2:])


def test_flat_entry_point_short_input():
    np.testing.assert_array_equal(catmull_rom_flat([4.0, 5.0]), [4.0, 5.0])
    assert catmull_rom_flat([]).shape == (0,)

    out = catmull_rom_flat([0.0, 0.0, 1.0, 1.0], subdivisions=3, alpha=0.0)
    assert out.shape == (8,)


def test_to_points_rejects_bad_shape():
    with pytest.raises(InvalidArgumentError):
        to_points([(1.0, 2.0, 3.0)])
