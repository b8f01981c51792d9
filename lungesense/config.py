"""
Tunable thresholds and smoothing, overridable from the environment (.env supported).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError

# Knee angle (deg) of a fully straight leg in the progress formula.
STANDING_ANGLE_DEG = 180.0
# Knee bend (deg) above which a leg counts as lunging down.
LUNGE_THRESHOLD_DEG = 80.0
# Standing threshold (deg); a knee within (STANDING_ANGLE_DEG - this) of straight counts as up.
STANDING_THRESHOLD_DEG = 170.0
# Frames in the moving-average window.
SMOOTHING_WINDOW = 5

_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class LungeConfig:
    smoothing_window: int = SMOOTHING_WINDOW
    standing_angle_deg: float = STANDING_ANGLE_DEG
    lunge_threshold_deg: float = LUNGE_THRESHOLD_DEG
    standing_threshold_deg: float = STANDING_THRESHOLD_DEG

    def __post_init__(self) -> None:
        if self.smoothing_window < 1:
            raise ConfigError(f"smoothing_window must be >= 1, got {self.smoothing_window}")
        if self.progress_span <= 0:
            raise ConfigError(
                f"standing_angle_deg ({self.standing_angle_deg}) must exceed "
                f"lunge_threshold_deg ({self.lunge_threshold_deg})"
            )
        if self.high_angle_deg <= 0:
            raise ConfigError(
                f"standing_threshold_deg ({self.standing_threshold_deg}) must be below "
                f"standing_angle_deg ({self.standing_angle_deg})"
            )
        if self.high_angle_deg >= self.lunge_threshold_deg:
            raise ConfigError(
                f"straightened angle ({self.high_angle_deg}) must be below "
                f"lunge_threshold_deg ({self.lunge_threshold_deg})"
            )

    @property
    def progress_span(self) -> float:
        return self.standing_angle_deg - self.lunge_threshold_deg

    @property
    def high_angle_deg(self) -> float:
        """Knee angles below this count as straightened (10 deg with defaults)."""
        return self.standing_angle_deg - self.standing_threshold_deg

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LungeConfig":
        """Build config from LUNGE_* variables; loads .env files first when reading os.environ."""
        if environ is None:
            load_dotenv()
            load_dotenv(_ROOT / ".env")
            environ = os.environ
        return cls(
            smoothing_window=_parse(environ, "LUNGE_SMOOTHING_WINDOW", int, SMOOTHING_WINDOW),
            standing_angle_deg=_parse(environ, "LUNGE_STANDING_ANGLE_DEG", float, STANDING_ANGLE_DEG),
            lunge_threshold_deg=_parse(environ, "LUNGE_DOWN_THRESHOLD_DEG", float, LUNGE_THRESHOLD_DEG),
            standing_threshold_deg=_parse(
                environ, "LUNGE_STANDING_THRESHOLD_DEG", float, STANDING_THRESHOLD_DEG
            ),
        )


def _parse(environ: Mapping[str, str], key: str, cast, default):
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{key}={raw!r} is not a valid {cast.__name__}") from e
