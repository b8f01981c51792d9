import math

import pytest

from lungesense.errors import DegenerateGeometryError, FrameRejected
from lungesense.geometry import angle_degrees


def test_straight_line_has_no_bend():
    assert angle_degrees((0.0, 0.0), (0.0, 1.0), (0.0, 2.0)) == pytest.approx(0.0)


def test_folded_back_is_180():
    assert angle_degrees((0.0, 0.0), (0.0, 1.0), (0.0, 0.0)) == pytest.approx(180.0)


def test_perpendicular_is_90():
    assert angle_degrees((0.0, 0.0), (0.0, 1.0), (1.0, 1.0)) == pytest.approx(90.0)


@pytest.mark.parametrize(
    "p1,p2,p3",
    [
        ((0.1, 0.2), (0.3, 0.5), (0.2, 0.9)),
        ((0.5, 0.5), (0.6, 0.7), (0.9, 0.7)),
        ((0.4, 0.3), (0.4, 0.6), (0.1, 0.8)),
    ],
)
def test_symmetric_under_reflection(p1, p2, p3):
    def mirror(p):
        return (1.0 - p[0], p[1])

    assert angle_degrees(p1, p2, p3) == pytest.approx(angle_degrees(mirror(p1), mirror(p2), mirror(p3)))


def test_result_in_range():
    a = angle_degrees((0.2, 0.1), (0.25, 0.4), (0.6, 0.2))
    assert 0.0 <= a <= 180.0


@pytest.mark.parametrize(
    "p1,p2,p3",
    [
        ((0.3, 0.3), (0.3, 0.3), (0.5, 0.5)),
        ((0.1, 0.1), (0.3, 0.3), (0.3, 0.3)),
        ((math.nan, 0.1), (0.3, 0.3), (0.4, 0.5)),
    ],
)
def test_degenerate_points_raise(p1, p2, p3):
    with pytest.raises(DegenerateGeometryError):
        angle_degrees(p1, p2, p3)


def test_degenerate_is_a_frame_rejection():
    assert issubclass(DegenerateGeometryError, FrameRejected)
    assert issubclass(DegenerateGeometryError, ValueError)
