"""
Lunge rep counting from per-frame pose landmarks.
"""
from .config import LungeConfig
from .errors import DegenerateGeometryError, FrameRejected, IncompleteJointSetError
from .features import Features, extract_features
from .pipeline import LungePipeline
from .reps import LungeRepDetector, LungeState
from .smoothing import MovingAverageSmoother

__all__ = [
    "DegenerateGeometryError",
    "Features",
    "FrameRejected",
    "IncompleteJointSetError",
    "LungeConfig",
    "LungePipeline",
    "LungeRepDetector",
    "LungeState",
    "MovingAverageSmoother",
    "extract_features",
]
