"""
Per-session lunge pipeline: landmarks -> features -> moving average -> rep detector.

The host feeds frames with push() (one pose per frame, or None when detection failed) and
receives push-style notifications through the on_progress / on_rep callables. Frames that
cannot be used are skipped without touching the smoothing window or the detector.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from .config import LungeConfig
from .errors import FrameRejected
from .features import JointSet, extract_features
from .reps import LungeRepDetector
from .smoothing import MovingAverageSmoother

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]
RepCallback = Callable[[int], None]


class LungePipeline:
    """
    One instance per exercise session. Not thread-safe: callers must serialize push().
    """

    def __init__(
        self,
        config: Optional[LungeConfig] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_rep: Optional[RepCallback] = None,
    ):
        self.config = config or LungeConfig()
        self.smoother = MovingAverageSmoother(self.config.smoothing_window)
        self.detector = LungeRepDetector(self.config)
        self.on_progress = on_progress
        self.on_rep = on_rep
        self.frames_processed = 0
        self.frames_skipped = 0

    @property
    def rep_count(self) -> int:
        return self.detector.rep_count

    @property
    def state(self) -> str:
        return self.detector.state.value

    def reset(self) -> None:
        """Start a new session: empty window, STANDING, zero reps."""
        self.smoother.reset()
        self.detector.reset()
        self.frames_processed = 0
        self.frames_skipped = 0
        logger.info("lunge_pipeline: reset")

    def push(self, joints: Optional[JointSet]) -> dict[str, Any]:
        """
        Push one frame. Returns current state for the host/overlay:
        rep_count, progress, state, rep_completed, status.
        """
        if joints is None or len(joints) == 0:
            self.frames_skipped += 1
            return self._skipped("No pose")
        try:
            features = extract_features(joints)
        except FrameRejected as e:
            self.frames_skipped += 1
            logger.debug("lunge_pipeline: frame skipped (%s)", e)
            return self._skipped(e.status)

        smoothed = self.smoother.push(features)
        progress, rep_completed = self.detector.update(smoothed)
        self.frames_processed += 1

        if progress is not None and self.on_progress is not None:
            self.on_progress(progress)
        if rep_completed and self.on_rep is not None:
            self.on_rep(self.detector.rep_count)

        return {
            "rep_count": self.detector.rep_count,
            "progress": progress,
            "state": self.detector.state.value,
            "rep_completed": rep_completed,
            "status": "Tracking",
            "left_knee_angle": smoothed.left_knee_angle,
            "right_knee_angle": smoothed.right_knee_angle,
            "hip_height_diff": smoothed.hip_height_diff,
        }

    def push_detections(self, results: Iterable[Optional[JointSet]]) -> list[dict[str, Any]]:
        """
        Push every detection result of one processing tick, in order.
        Empty results go through push() too, so they count toward frames_skipped
        exactly like a single push(None).
        """
        return [self.push(joints) for joints in results]

    def _skipped(self, status: str) -> dict[str, Any]:
        return {
            "rep_count": self.detector.rep_count,
            "progress": None,
            "state": self.detector.state.value,
            "rep_completed": False,
            "status": status,
            "left_knee_angle": None,
            "right_knee_angle": None,
            "hip_height_diff": None,
        }
