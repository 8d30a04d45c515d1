"""
-------
conftest.py
-------
Shared pytest fixtures for curvekit tests.
"""

import pytest

from curvekit.core import BezierPath, OutOfRange
from curvekit.core import interpolators


@pytest.fixture
def open_path() -> BezierPath:
    """Default one-segment path centered on the origin."""
    return BezierPath.create((0.0, 0.0))


@pytest.fixture
def two_segment_path() -> BezierPath:
    """Default path extended to an anchor at (3, 0)."""
    path = BezierPath.create((0.0, 0.0))
    path.add_segment((3.0, 0.0))
    return path


@pytest.fixture
def straight_path() -> BezierPath:
    """Straight cubic from (0, 0) to (10, 0) with evenly spaced handles."""
    return BezierPath([(0.0, 0.0), (10.0 / 3.0, 0.0), (20.0 / 3.0, 0.0), (10.0, 0.0)])


@pytest.fixture
def auto_square() -> BezierPath:
    """Closed auto-smoothed loop through the corners of a 4x4 square."""
    path = BezierPath.create((2.0, 0.0), auto_set_control_points=True)
    path.move_point(0, (0.0, 0.0))
    path.move_point(3, (4.0, 0.0))
    path.add_segment((4.0, 4.0))
    path.add_segment((0.0, 4.0))
    path.toggle_closed()
    return path


@pytest.fixture
def restore_interpolation_policy():
    """Put the process-wide out-of-range policy back after the test."""
    yield
    interpolators.set_default_policy(OutOfRange.CLAMP)
