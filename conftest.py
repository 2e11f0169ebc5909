import numpy as np
import pytest


@pytest.fixture
def waypoints():
    # uneven spacing and a sharp turn, the demo route of the path smoother
    return np.array([
        (0.0, 0.0),
        (-2.45, 1.54),
        (-3.7, 4.02),
        (-7.0, 0.0),
        (-7.3, 13.7)
    ], dtype=float)
