import pytest

from lungesense.features import Features
from lungesense.smoothing import MovingAverageSmoother


def test_identical_window_is_unchanged():
    s = MovingAverageSmoother(5)
    f = Features(hip_height_diff=0.25, left_knee_angle=45.0, right_knee_angle=90.0)
    for _ in range(5):
        out = s.push(f)
    assert out == f


def test_includes_just_pushed_sample():
    s = MovingAverageSmoother(5)
    out = s.push(Features(0.5, 10.0, 20.0))
    assert out == Features(0.5, 10.0, 20.0)
    out = s.push(Features(0.0, 30.0, 40.0))
    assert out.left_knee_angle == pytest.approx(20.0)
    assert out.right_knee_angle == pytest.approx(30.0)
    assert out.hip_height_diff == pytest.approx(0.25)


def test_oldest_evicted():
    s = MovingAverageSmoother(5)
    for v in range(1, 7):
        out = s.push(Features(0.0, float(v), float(v) * 2))
    assert len(s) == 5
    # mean of 2..6
    assert out.left_knee_angle == pytest.approx(4.0)
    assert out.right_knee_angle == pytest.approx(8.0)


def test_reset_empties_window():
    s = MovingAverageSmoother(3)
    s.push(Features(0.0, 100.0, 100.0))
    s.push(Features(0.0, 100.0, 100.0))
    s.reset()
    assert len(s) == 0
    assert s.push(Features(0.0, 10.0, 10.0)).left_knee_angle == pytest.approx(10.0)


def test_invalid_window():
    with pytest.raises(ValueError):
        MovingAverageSmoother(0)
