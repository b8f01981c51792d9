"""
Frame rejection errors. Every one of these means "skip this frame, keep prior state".
"""
from __future__ import annotations


class FrameRejected(ValueError):
    """A frame's landmarks cannot be turned into lunge features."""

    status = "Rejected"


class IncompleteJointSetError(FrameRejected):
    status = "Incomplete pose"


class DegenerateGeometryError(FrameRejected):
    status = "Degenerate pose"


class ConfigError(ValueError):
    pass
