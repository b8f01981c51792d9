"""
Draw skeleton, rep count, state and phase progress on frames (in-place).
"""
from __future__ import annotations

from typing import Any, Optional

import cv2
import numpy as np

from .features import JointSet
from .landmarks import LUNGE_JOINTS, NUM_LANDMARKS, POSE_CONNECTIONS, SKELETON_JOINTS
from .pose import to_pixels

_FONT = cv2.FONT_HERSHEY_SIMPLEX
_WHITE = (255, 255, 255)
_GREEN = (0, 255, 0)
_LEG = (0, 200, 255)


def _pt(p: tuple[float, float]) -> tuple[int, int]:
    return (int(round(p[0])), int(round(p[1])))


def draw_skeleton(frame: np.ndarray, joints: Optional[JointSet], thickness: int = 2) -> None:
    """joints: normalized (x, y) for 33 landmarks; torso and legs drawn, lunge joints highlighted."""
    if joints is None or len(joints) < NUM_LANDMARKS:
        return
    h, w = frame.shape[:2]
    pts = to_pixels(joints, w, h)
    for (i, j) in POSE_CONNECTIONS:
        if pts[i] is not None and pts[j] is not None:
            cv2.line(frame, _pt(pts[i]), _pt(pts[j]), _GREEN, thickness)
    for idx in SKELETON_JOINTS:
        p = pts[idx]
        if p is None:
            continue
        radius, color = (6, _LEG) if idx in LUNGE_JOINTS else (3, _GREEN)
        cv2.circle(frame, _pt(p), radius, color, -1)


def draw_progress_bar(frame: np.ndarray, progress: Optional[float], x: int, y: int, width: int = 240, height: int = 18) -> None:
    cv2.rectangle(frame, (x, y), (x + width, y + height), _WHITE, 1)
    if progress is None:
        return
    fill = int(round(max(0.0, min(1.0, progress)) * (width - 2)))
    if fill > 0:
        cv2.rectangle(frame, (x + 1, y + 1), (x + 1 + fill, y + height - 1), _LEG, -1)


def draw_realtime_overlay(
    frame: np.ndarray,
    joints: Optional[JointSet],
    update: dict[str, Any],
    last_progress: Optional[float] = None,
    message: Optional[str] = None,
) -> None:
    """
    Overlay for one pipeline update (see LungePipeline.push):
    skeleton, Rep: N, State, knee angles, progress bar, optional centered message.
    LUNGE_UP emits no progress, so the bar keeps showing last_progress.
    """
    h, w = frame.shape[:2]
    draw_skeleton(frame, joints)

    panel = frame.copy()
    cv2.rectangle(panel, (0, 0), (w, 150), (40, 40, 40), -1)
    cv2.addWeighted(panel, 0.6, frame, 0.4, 0, frame)

    def put(line: str, y: int) -> None:
        cv2.putText(frame, line, (12, y), _FONT, 0.6, _WHITE, 2, cv2.LINE_AA)

    def fmt(val: Optional[float]) -> str:
        return f"{val:.1f}" if val is not None else "--"

    put(f"Reps: {update['rep_count']}", 28)
    put(f"State: {update['state']}  ({update['status']})", 56)
    put(f"Knee L/R: {fmt(update.get('left_knee_angle'))} / {fmt(update.get('right_knee_angle'))} deg", 84)
    progress = update.get("progress")
    draw_progress_bar(frame, progress if progress is not None else last_progress, 12, 104)

    if message:
        cv2.putText(frame, message, (w // 2 - 120, h // 2), _FONT, 0.8, (0, 200, 255), 2, cv2.LINE_AA)
