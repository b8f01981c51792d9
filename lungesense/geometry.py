"""
Joint angle geometry on normalized 2D landmarks.
"""
from __future__ import annotations

import math

from .errors import DegenerateGeometryError

Point = tuple[float, float]

# Vectors shorter than this are treated as coincident points
_MIN_NORM = 1e-9


def angle_degrees(p1: Point, p2: Point, p3: Point) -> float:
    """
    Bend angle at p2 between the directions p1->p2 and p2->p3, in degrees [0, 180].
    0 = p1, p2, p3 on a straight line (e.g. straight leg), 180 = folded back onto itself.
    Raises DegenerateGeometryError if two consecutive points coincide.
    """
    v1 = (p2[0] - p1[0], p2[1] - p1[1])
    v2 = (p3[0] - p2[0], p3[1] - p2[1])
    norm1 = math.hypot(v1[0], v1[1])
    norm2 = math.hypot(v2[0], v2[1])
    if not (math.isfinite(norm1) and math.isfinite(norm2)):
        raise DegenerateGeometryError(f"non-finite landmark in angle: {p1}, {p2}, {p3}")
    if norm1 < _MIN_NORM or norm2 < _MIN_NORM:
        raise DegenerateGeometryError(f"coincident landmarks in angle: {p1}, {p2}, {p3}")
    cos_val = (v1[0] * v2[0] + v1[1] * v2[1]) / (norm1 * norm2)
    cos_val = max(-1.0, min(1.0, cos_val))
    return math.degrees(math.acos(cos_val))
