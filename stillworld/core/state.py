# stillworld/core/state.py
"""
Plain data for one frame of the simulation.

The update functions in ``motion``, ``camera`` and ``simulation`` treat these
as values: they never mutate an instance they were given and instead return
replacements built with ``dataclasses.replace``.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import stillworld.utils.settings as settings


@dataclass(frozen=True)
class FrameInput:
    """Held-key snapshot for one frame."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    slow: bool = False


@dataclass
class Player:
    """Player marker in WORLD coordinates (center point)."""
    x: float = float(settings.START_X)
    y: float = float(settings.START_Y)
    vx: float = 0.0
    vy: float = 0.0
    size: int = settings.PLAYER_SIZE

    @property
    def moving(self) -> bool:
        return abs(self.vx) + abs(self.vy) > 0


@dataclass
class CameraState:
    """Camera top-left in WORLD coordinates: live (x, y) and target (tx, ty)."""
    x: float = 0.0
    y: float = 0.0
    tx: float = 0.0
    ty: float = 0.0


@dataclass
class Options:
    """Comfort toggles."""
    reduced_motion: bool = False
    high_contrast: bool = False


@dataclass
class WorldState:
    player: Player = field(default_factory=Player)
    camera: CameraState = field(default_factory=CameraState)
    options: Options = field(default_factory=Options)
    drift_fade: float = 0.0
    frame: int = 0
    accumulator: float = 0.0
