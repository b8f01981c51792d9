"""
Frame sources for the host loop: video file or webcam.
Each yields (frame_bgr, frame_idx, fps) and releases the capture on exit.
"""
from __future__ import annotations

import time
from typing import Generator, Optional

import cv2
import numpy as np

Frames = Generator[tuple[np.ndarray, int, float], None, None]

# Fallback when the container does not report a frame rate
DEFAULT_FPS = 30.0


def video_frames(video_path: str, max_frames: Optional[int] = None) -> Frames:
    cap = cv2.VideoCapture(video_path)
    if not cap.isOpened():
        raise FileNotFoundError(f"Cannot open video: {video_path}")
    try:
        fps = cap.get(cv2.CAP_PROP_FPS) or DEFAULT_FPS
        idx = 0
        while max_frames is None or idx < max_frames:
            ret, frame = cap.read()
            if not ret:
                break
            yield (frame, idx, fps)
            idx += 1
    finally:
        cap.release()


def webcam_frames(camera_id: int = 0, target_fps: float = DEFAULT_FPS, mirror: bool = True) -> Frames:
    """
    Yield webcam frames (mirrored by default so the user sees a selfie view).
    fps is an EMA estimate from actual frame timings.
    """
    cap = cv2.VideoCapture(camera_id)
    if not cap.isOpened():
        raise RuntimeError(f"Cannot open camera {camera_id}. Check permissions and that no other app is using it.")
    try:
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, 1280)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, 720)
        cap.set(cv2.CAP_PROP_FPS, target_fps)
        fps_est = float(target_fps)
        t_prev = time.perf_counter()
        idx = 0
        while True:
            ret, frame = cap.read()
            if not ret:
                break
            t_now = time.perf_counter()
            if t_now > t_prev:
                fps_est = 0.9 * fps_est + 0.1 / (t_now - t_prev)
            t_prev = t_now
            yield (cv2.flip(frame, 1) if mirror else frame, idx, fps_est)
            idx += 1
    finally:
        cap.release()

