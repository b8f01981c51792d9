"""
Lunge rep detection: three-state machine over smoothed knee angles.
STANDING -> LUNGE_DOWN -> LUNGE_UP -> STANDING counts one rep.
"""
from __future__ import annotations

import enum
import logging
from typing import Optional

from .config import LungeConfig
from .features import Features

logger = logging.getLogger(__name__)


class LungeState(enum.Enum):
    STANDING = "STANDING"
    LUNGE_DOWN = "LUNGE_DOWN"
    LUNGE_UP = "LUNGE_UP"


class LungeRepDetector:
    """
    Feed one smoothed Features per frame via update().

    Progress is reported in STANDING and LUNGE_DOWN (computed before the transition test,
    with the pre-transition state's formula); nothing is reported in LUNGE_UP. LUNGE_UP only
    returns to STANDING on a frame that is still straightened, so a single noisy frame cannot
    complete a rep.
    """

    def __init__(self, config: Optional[LungeConfig] = None):
        self.config = config or LungeConfig()
        self.state = LungeState.STANDING
        self.rep_count = 0

    def reset(self) -> None:
        self.state = LungeState.STANDING
        self.rep_count = 0

    def is_low(self, left: float, right: float) -> bool:
        thresh = self.config.lunge_threshold_deg
        return left > thresh or right > thresh

    def is_high(self, left: float, right: float) -> bool:
        thresh = self.config.high_angle_deg
        return left < thresh or right < thresh

    def progress(self, left: float, right: float) -> float:
        p = max(left, right) / self.config.progress_span
        return max(0.0, min(1.0, p))

    def update(self, features: Features) -> tuple[Optional[float], bool]:
        """
        Advance one frame. Returns (progress or None, rep_completed).
        """
        left = features.left_knee_angle
        right = features.right_knee_angle
        progress: Optional[float] = None
        rep_completed = False

        if self.state == LungeState.STANDING:
            progress = self.progress(left, right)
            if self.is_low(left, right):
                self._transition(LungeState.LUNGE_DOWN, left, right)
        elif self.state == LungeState.LUNGE_DOWN:
            progress = self.progress(left, right)
            if self.is_high(left, right):
                self._transition(LungeState.LUNGE_UP, left, right)
        elif self.state == LungeState.LUNGE_UP:
            if self.is_high(left, right):
                self._transition(LungeState.STANDING, left, right)
                self.rep_count += 1
                rep_completed = True
                logger.info("lunge_rep: rep %s (left_knee=%.1f right_knee=%.1f)", self.rep_count, left, right)

        return progress, rep_completed

    def _transition(self, new_state: LungeState, left: float, right: float) -> None:
        logger.debug(
            "lunge_rep: %s -> %s (left_knee=%.1f right_knee=%.1f)",
            self.state.value, new_state.value, left, right,
        )
        self.state = new_state
