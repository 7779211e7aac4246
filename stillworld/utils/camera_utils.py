# stillworld/utils/camera_utils.py
from __future__ import annotations


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def lerp(a: float, b: float, t: float) -> float:
    """Exponential-smoothing step when called once per frame: a += (b - a) * t."""
    return a + (b - a) * t
