import numpy as np
import pytest

from lungesense.overlay import draw_progress_bar, draw_realtime_overlay, draw_skeleton
from lungesense.pose import to_pixels


def test_to_pixels_scales_and_keeps_missing():
    pts = to_pixels([(0.5, 0.25), None, (1.0, 0.0)], 640, 480)
    assert pts[0] == pytest.approx((320.0, 120.0))
    assert pts[1] is None
    assert pts[2] == pytest.approx((640.0, 0.0))


def test_progress_bar_clamps_above_one():
    over = np.zeros((40, 300, 3), dtype=np.uint8)
    full = np.zeros((40, 300, 3), dtype=np.uint8)
    draw_progress_bar(over, 2.5, 10, 10, width=100, height=12)
    draw_progress_bar(full, 1.0, 10, 10, width=100, height=12)
    assert np.array_equal(over, full)
    # filled up to the right edge, nothing past the outline
    assert over[16, 105].any()
    assert not over[16, 115].any()


def test_progress_bar_without_progress_is_outline_only():
    frame = np.zeros((40, 300, 3), dtype=np.uint8)
    draw_progress_bar(frame, None, 10, 10, width=100, height=12)
    assert frame[10, 50].any()
    assert not frame[16, 50].any()


def test_skeleton_ignores_short_joint_sets(make_joints):
    frame = np.zeros((120, 160, 3), dtype=np.uint8)
    draw_skeleton(frame, make_joints(30.0, 30.0)[:10])
    assert not frame.any()
    draw_skeleton(frame, np.array(make_joints(30.0, 30.0)))
    assert frame.any()


def test_realtime_overlay_draws_skipped_update():
    frame = np.zeros((240, 320, 3), dtype=np.uint8)
    update = {
        "rep_count": 2,
        "progress": None,
        "state": "LUNGE_UP",
        "status": "No pose",
        "left_knee_angle": None,
        "right_knee_angle": None,
    }
    draw_realtime_overlay(frame, None, update, last_progress=0.4, message="Move into frame")
    assert frame.any()
