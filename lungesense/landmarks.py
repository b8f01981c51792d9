"""
MediaPipe Pose landmark indices (33-point body model, same as PoseLandmark).
Only the joints this package reads or draws are named.
"""
from __future__ import annotations

# Landmarks produced per detected pose
NUM_LANDMARKS = 33


class LandmarkIdx:
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


# Joints the lunge features are computed from
LUNGE_JOINTS = (
    LandmarkIdx.LEFT_HIP,
    LandmarkIdx.RIGHT_HIP,
    LandmarkIdx.LEFT_KNEE,
    LandmarkIdx.RIGHT_KNEE,
    LandmarkIdx.LEFT_ANKLE,
    LandmarkIdx.RIGHT_ANKLE,
)

# Torso and leg skeleton drawn by the overlay
POSE_CONNECTIONS = frozenset([
    (LandmarkIdx.LEFT_SHOULDER, LandmarkIdx.RIGHT_SHOULDER),
    (LandmarkIdx.LEFT_SHOULDER, LandmarkIdx.LEFT_HIP),
    (LandmarkIdx.RIGHT_SHOULDER, LandmarkIdx.RIGHT_HIP),
    (LandmarkIdx.LEFT_HIP, LandmarkIdx.RIGHT_HIP),
    (LandmarkIdx.LEFT_HIP, LandmarkIdx.LEFT_KNEE),
    (LandmarkIdx.RIGHT_HIP, LandmarkIdx.RIGHT_KNEE),
    (LandmarkIdx.LEFT_KNEE, LandmarkIdx.LEFT_ANKLE),
    (LandmarkIdx.RIGHT_KNEE, LandmarkIdx.RIGHT_ANKLE),
    (LandmarkIdx.LEFT_ANKLE, LandmarkIdx.LEFT_HEEL),
    (LandmarkIdx.RIGHT_ANKLE, LandmarkIdx.RIGHT_HEEL),
    (LandmarkIdx.LEFT_HEEL, LandmarkIdx.LEFT_FOOT_INDEX),
    (LandmarkIdx.RIGHT_HEEL, LandmarkIdx.RIGHT_FOOT_INDEX),
    (LandmarkIdx.LEFT_ANKLE, LandmarkIdx.LEFT_FOOT_INDEX),
    (LandmarkIdx.RIGHT_ANKLE, LandmarkIdx.RIGHT_FOOT_INDEX),
])

# Landmarks drawn as dots
SKELETON_JOINTS = frozenset(i for edge in POSE_CONNECTIONS for i in edge)
