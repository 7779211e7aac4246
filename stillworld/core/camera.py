# stillworld/core/camera.py
"""
Camera controller for a large 2D world.

- Target centered on the player every frame
- Idle auto-drift (noise offset) faded in while the player rests
- Soft bounds: target held inside the overscroll margin and eased back
  toward the world edge
- Calm follow: live position eases toward the target (lerp)
- Subtle breathing zoom, disabled by reduced motion

The camera position is the *top-left* of the viewport in world coordinates.
"""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Tuple

import stillworld.utils.settings as settings
from stillworld.core.noise_adapter import NoiseFn
from stillworld.core.state import CameraState, Options, Player
from stillworld.utils.camera_utils import clamp, lerp

Bounds = Tuple[float, float, float, float]  # (min_x, min_y, max_x, max_y)

VIEW_SIZE = (settings.VIEW_WIDTH, settings.VIEW_HEIGHT)
WORLD_SIZE = (settings.WORLD_WIDTH, settings.WORLD_HEIGHT)


def camera_bounds(
    world: Tuple[float, float] = WORLD_SIZE,
    view: Tuple[float, float] = VIEW_SIZE,
    pad: float = settings.CAMERA_OVERSCROLL_PAD,
) -> Bounds:
    """Range the camera target may occupy: the world plus ``pad`` of overscroll."""
    return (
        -pad,
        -pad,
        world[0] - view[0] + pad,
        world[1] - view[1] + pad,
    )


def centered_target(player: Player, view: Tuple[float, float] = VIEW_SIZE) -> Tuple[float, float]:
    return player.x - view[0] / 2, player.y - view[1] / 2


def view_center(camera: CameraState, view: Tuple[float, float] = VIEW_SIZE) -> Tuple[float, float]:
    return camera.x + view[0] / 2, camera.y + view[1] / 2


# ---------------------------------------------------------------------
# Idle drift
# ---------------------------------------------------------------------
def update_drift_fade(fade: float, moving: bool, reduced_motion: bool) -> float:
    """Ease toward 1 while idle, toward 0 while moving; 0 with reduced motion."""
    if reduced_motion:
        return 0.0
    if moving:
        return lerp(fade, 0.0, settings.DRIFT_FADE_OUT)
    return lerp(fade, 1.0, settings.DRIFT_FADE_IN)


def drift_offset(frame: int, fade: float, noise: NoiseFn) -> Tuple[float, float]:
    """Low-frequency wander added to the target; ``noise`` must return [0, 1]."""
    if fade <= settings.DRIFT_MIN_FADE:
        return 0.0, 0.0
    t = frame * settings.DRIFT_SPEED
    scale = 2 * settings.DRIFT_AMOUNT * fade
    return (noise(t, 0.0) - 0.5) * scale, (noise(0.0, t) - 0.5) * scale


# ---------------------------------------------------------------------
# Bounds / follow
# ---------------------------------------------------------------------
def soft_clamp(
    value: float,
    lo: float,
    hi: float,
    *,
    pad: float = settings.CAMERA_OVERSCROLL_PAD,
    softness: float = settings.CAMERA_CLAMP_SOFT,
) -> float:
    """
    Clamp ``value`` into the overscroll range [lo, hi], then ease it toward the
    world edge range [lo + pad, hi - pad] by ``softness``.

    Inside the world the value is untouched. Past an edge it rests slightly in
    the overscroll margin instead of stopping dead on the edge. This is not a
    pure clamp: a value already inside the margin band is compressed by
    ``1 - softness`` toward the edge as well (-30 becomes -27.6).
    """
    hard = clamp(value, lo, hi)
    edge = clamp(hard, lo + pad, hi - pad)
    return lerp(hard, edge, softness)


def follow(camera: CameraState, reduced_motion: bool) -> CameraState:
    """Ease the live position toward the target."""
    t = settings.CAMERA_SMOOTH_REDUCED if reduced_motion else settings.CAMERA_SMOOTH
    return replace(camera, x=lerp(camera.x, camera.tx, t), y=lerp(camera.y, camera.ty, t))


def update_camera(
    camera: CameraState,
    player: Player,
    fade: float,
    options: Options,
    frame: int,
    noise: NoiseFn,
) -> Tuple[CameraState, float]:
    """One frame of camera control. Returns (camera, drift_fade)."""
    tx, ty = centered_target(player)

    fade = update_drift_fade(fade, player.moving, options.reduced_motion)
    dx, dy = drift_offset(frame, fade, noise)
    tx += dx
    ty += dy

    min_x, min_y, max_x, max_y = camera_bounds()
    tx = soft_clamp(tx, min_x, max_x)
    ty = soft_clamp(ty, min_y, max_y)

    camera = follow(replace(camera, tx=tx, ty=ty), options.reduced_motion)
    return camera, fade


def breath_zoom(frame: int, reduced_motion: bool) -> float:
    """Tiny zoom oscillation (~12s period); exactly 1.0 with reduced motion."""
    if reduced_motion:
        return 1.0
    return 1.0 + math.sin(frame * settings.BREATH_RATE) * settings.BREATH_AMP
