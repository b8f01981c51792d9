"""
Per-frame lunge features from one pose's landmarks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import IncompleteJointSetError
from .geometry import Point, angle_degrees
from .landmarks import LandmarkIdx

# One detected pose: landmark index -> (x, y), normalized image coords
JointSet = Sequence[Optional[Point]]


@dataclass(frozen=True)
class Features:
    """Knee bend angles (deg) and vertical hip offset (normalized units)."""

    hip_height_diff: float
    left_knee_angle: float
    right_knee_angle: float


def _get_point(joints: JointSet, idx: int) -> Point:
    if idx >= len(joints) or joints[idx] is None:
        raise IncompleteJointSetError(f"landmark {idx} missing ({len(joints)} landmarks in pose)")
    p = joints[idx]
    return (float(p[0]), float(p[1]))


def extract_features(joints: JointSet) -> Features:
    lh = _get_point(joints, LandmarkIdx.LEFT_HIP)
    rh = _get_point(joints, LandmarkIdx.RIGHT_HIP)
    lk = _get_point(joints, LandmarkIdx.LEFT_KNEE)
    rk = _get_point(joints, LandmarkIdx.RIGHT_KNEE)
    la = _get_point(joints, LandmarkIdx.LEFT_ANKLE)
    ra = _get_point(joints, LandmarkIdx.RIGHT_ANKLE)
    return Features(
        hip_height_diff=abs(lh[1] - rh[1]),
        left_knee_angle=angle_degrees(lh, lk, la),
        right_knee_angle=angle_degrees(rh, rk, ra),
    )
