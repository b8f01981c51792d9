from __future__ import annotations

import math

import pytest

from lungesense.landmarks import NUM_LANDMARKS, LandmarkIdx

THIGH = 0.2
SHIN = 0.2


def _leg(hip_x: float, hip_y: float, bend_deg: float):
    """Hip, knee, ankle with the shin bent bend_deg away from the thigh direction."""
    knee = (hip_x, hip_y + THIGH)
    rad = math.radians(bend_deg)
    ankle = (knee[0] + SHIN * math.sin(rad), knee[1] + SHIN * math.cos(rad))
    return (hip_x, hip_y), knee, ankle


def build_joints(left_bend: float, right_bend: float, hip_offset: float = 0.0):
    joints = [(0.5, 0.1)] * NUM_LANDMARKS
    lh, lk, la = _leg(0.45, 0.5, left_bend)
    rh, rk, ra = _leg(0.55, 0.5 + hip_offset, right_bend)
    joints[LandmarkIdx.LEFT_HIP] = lh
    joints[LandmarkIdx.LEFT_KNEE] = lk
    joints[LandmarkIdx.LEFT_ANKLE] = la
    joints[LandmarkIdx.RIGHT_HIP] = rh
    joints[LandmarkIdx.RIGHT_KNEE] = rk
    joints[LandmarkIdx.RIGHT_ANKLE] = ra
    return joints


@pytest.fixture
def make_joints():
    return build_joints
