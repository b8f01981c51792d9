"""
MediaPipe Pose estimation. Returns one pose's landmarks in normalized image coordinates.
Uses Pose Landmarker task (MediaPipe 0.10+), falls back to the legacy solutions API.
"""
from __future__ import annotations

import os
import urllib.request
from typing import Optional

import cv2
import numpy as np

from .features import JointSet

# Pose Landmarker model URL (lite = faster, CPU-friendly)
_POSE_MODEL_URL = "https://storage.googleapis.com/mediapipe-models/pose_landmarker/pose_landmarker_lite/float16/1/pose_landmarker_lite.task"
_POSE_MODEL_FILENAME = "pose_landmarker_lite.task"


def _get_model_path(cache_dir: Optional[str] = None) -> str:
    """Return path to pose landmarker model, downloading if needed."""
    if cache_dir is None:
        cache_dir = os.path.join(os.path.dirname(__file__), "..", "outputs")
    os.makedirs(cache_dir, exist_ok=True)
    path = os.path.join(cache_dir, _POSE_MODEL_FILENAME)
    if not os.path.isfile(path):
        urllib.request.urlretrieve(_POSE_MODEL_URL, path)
    return path


def _create_landmarker(
    min_detection_confidence: float,
    min_tracking_confidence: float,
    cache_dir: Optional[str] = None,
):
    from mediapipe.tasks.python.core import base_options
    from mediapipe.tasks.python.vision import PoseLandmarker, PoseLandmarkerOptions
    from mediapipe.tasks.python.vision.core import vision_task_running_mode

    model_path = _get_model_path(cache_dir)
    base = base_options.BaseOptions(model_asset_path=model_path)
    options = PoseLandmarkerOptions(
        base_options=base,
        running_mode=vision_task_running_mode.VisionTaskRunningMode.IMAGE,
        num_poses=1,
        min_pose_detection_confidence=min_detection_confidence,
        min_pose_presence_confidence=min_detection_confidence,
        min_tracking_confidence=min_tracking_confidence,
    )
    return PoseLandmarker.create_from_options(options)


def process_frame(frame_bgr: np.ndarray, pose) -> Optional[JointSet]:
    """
    Run pose estimation on one BGR frame.
    Returns list of (x, y) normalized to [0, 1] for 33 landmarks, or None if no pose.
    """
    rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)

    if hasattr(pose, "detect"):
        from mediapipe.tasks.python.vision.core import image as mp_image
        mp_img = mp_image.Image(image_format=mp_image.ImageFormat.SRGB, data=rgb)
        result = pose.detect(mp_img)
        if not result.pose_landmarks:
            return None
        return [(lm.x, lm.y) for lm in result.pose_landmarks[0]]
    # Legacy mp.solutions.pose.Pose (MediaPipe < 0.10)
    results = pose.process(rgb)
    if not results.pose_landmarks:
        return None
    return [(lm.x, lm.y) for lm in results.pose_landmarks.landmark]


def to_pixels(joints: JointSet, width: int, height: int) -> list[Optional[tuple[float, float]]]:
    return [(p[0] * width, p[1] * height) if p is not None else None for p in joints]


def create_pose_detector(
    min_detection_confidence: float = 0.5,
    min_tracking_confidence: float = 0.5,
    model_complexity: int = 1,
    cache_dir: Optional[str] = None,
):
    """
    Create pose detector. Uses MediaPipe 0.10+ PoseLandmarker (lite model);
    model_complexity only applies to the legacy API.
    """
    try:
        return _create_landmarker(min_detection_confidence, min_tracking_confidence, cache_dir)
    except (ImportError, AttributeError, RuntimeError, OSError):
        import mediapipe as mp
        return mp.solutions.pose.Pose(
            static_image_mode=False,
            model_complexity=min(model_complexity, 2),
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
