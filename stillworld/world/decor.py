# stillworld/world/decor.py
"""
Pre-generated decoration: landmarks (pools/stones) everywhere, drifting motes
in Dawn, twinkling stars in Dusk.

Generated once from a seed so the layout is the same every run; read-only
afterwards.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Tuple

import stillworld.utils.settings as settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Landmark:
    x: float
    y: float
    r: float
    t: float  # shimmer phase


@dataclass(frozen=True)
class Mote:
    x: float
    y: float
    r: float
    speed: float  # vertical drift px/frame
    n: float      # noise offset for sideways wander


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    alpha: float  # base opacity 0..1
    phase: float
    r: float


@dataclass(frozen=True)
class Decor:
    landmarks: Tuple[Landmark, ...]
    motes: Tuple[Mote, ...]
    stars: Tuple[Star, ...]


def generate_decor(
    seed: int = settings.WORLD_SEED,
    world: Tuple[float, float] = (settings.WORLD_WIDTH, settings.WORLD_HEIGHT),
    *,
    landmark_count: int = settings.LANDMARK_COUNT,
    mote_count: int = settings.MOTE_COUNT,
    star_count: int = settings.STAR_COUNT,
) -> Decor:
    w, h = world
    margin = settings.LANDMARK_MARGIN
    if w <= 2 * margin or h <= 2 * margin:
        raise ValueError(f"World {w}x{h} too small for decor (margin {margin})")

    rng = random.Random(seed)

    landmarks = tuple(
        Landmark(
            x=rng.uniform(margin, w - margin),
            y=rng.uniform(margin, h - margin),
            r=rng.uniform(20, 70),
            t=rng.uniform(0, 1000),
        )
        for _ in range(landmark_count)
    )

    motes = tuple(
        Mote(
            x=rng.uniform(0, w / 3),
            y=rng.uniform(0, h),
            r=rng.uniform(4, 12),
            speed=rng.uniform(0.15, 0.55),
            n=rng.uniform(0, 1000),
        )
        for _ in range(mote_count)
    )

    stars = tuple(
        Star(
            x=rng.uniform(w * 2 / 3, w),
            y=rng.uniform(0, h),
            alpha=rng.uniform(0.05, 0.2),
            phase=rng.uniform(0, math.pi * 2),
            r=rng.uniform(1.0, 2.0),
        )
        for _ in range(star_count)
    )

    logger.debug(
        "Decor seed=%s: %d landmarks, %d motes, %d stars",
        seed, len(landmarks), len(motes), len(stars),
    )
    return Decor(landmarks=landmarks, motes=motes, stars=stars)
