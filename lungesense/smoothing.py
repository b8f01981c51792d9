"""
Simple moving average over the most recent lunge features.
"""
from __future__ import annotations

from collections import deque

import numpy as np

from .config import SMOOTHING_WINDOW
from .features import Features


class MovingAverageSmoother:
    """
    Equal-weight average of the last `window_size` features, including the one just pushed.
    """

    def __init__(self, window_size: int = SMOOTHING_WINDOW):
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        self.window_size = window_size
        self._window: deque[Features] = deque(maxlen=window_size)

    def __len__(self) -> int:
        return len(self._window)

    def reset(self) -> None:
        self._window.clear()

    def push(self, features: Features) -> Features:
        self._window.append(features)
        values = np.array(
            [(f.hip_height_diff, f.left_knee_angle, f.right_knee_angle) for f in self._window],
            dtype=float,
        )
        hip, left, right = values.mean(axis=0)
        return Features(
            hip_height_diff=float(hip),
            left_knee_angle=float(left),
            right_knee_angle=float(right),
        )
