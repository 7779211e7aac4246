# stillworld/core/simulation.py
"""
Per-frame world update, decoupled from rendering.

``step`` advances exactly one fixed frame; ``update`` converts wall-clock dt
into whole frames with an accumulator so the feel does not depend on the
display refresh rate.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

import stillworld.utils.settings as settings
from stillworld.core.camera import update_camera
from stillworld.core.motion import update_player
from stillworld.core.noise_adapter import NoiseFn
from stillworld.core.state import CameraState, FrameInput, Options, Player, WorldState

logger = logging.getLogger(__name__)

FRAME_DT = 1.0 / settings.FPS


def new_state(options: Optional[Options] = None) -> WorldState:
    return reset(WorldState(options=options or Options()))


def reset(state: WorldState) -> WorldState:
    """Player back to the start, camera centered on it, drift quiet."""
    player = Player()
    cx = player.x - settings.VIEW_WIDTH / 2
    cy = player.y - settings.VIEW_HEIGHT / 2
    return replace(
        state,
        player=player,
        camera=CameraState(x=cx, y=cy, tx=cx, ty=cy),
        drift_fade=0.0,
    )


def toggle_reduced_motion(state: WorldState) -> WorldState:
    options = replace(state.options, reduced_motion=not state.options.reduced_motion)
    # Enabling reduced motion also quiets drift immediately
    fade = 0.0 if options.reduced_motion else state.drift_fade
    logger.info("Reduced motion %s", "ON" if options.reduced_motion else "OFF")
    return replace(state, options=options, drift_fade=fade)


def toggle_high_contrast(state: WorldState) -> WorldState:
    options = replace(state.options, high_contrast=not state.options.high_contrast)
    logger.info("High contrast %s", "ON" if options.high_contrast else "OFF")
    return replace(state, options=options)


def step(state: WorldState, inp: FrameInput, noise: NoiseFn) -> WorldState:
    """Advance one frame: player motion first, then the camera."""
    frame = state.frame + 1
    player = update_player(state.player, inp)
    camera, fade = update_camera(state.camera, player, state.drift_fade, state.options, frame, noise)
    return replace(state, player=player, camera=camera, drift_fade=fade, frame=frame)


def update(
    state: WorldState,
    inp: FrameInput,
    dt: float,
    noise: NoiseFn,
    *,
    max_steps: int = 5,
) -> WorldState:
    """
    Run as many fixed frames as ``dt`` (plus carried time) covers.

    dt is clamped to ``max_steps`` frames so a stall does not fast-forward
    the world.
    """
    dt = max(0.0, min(max_steps * FRAME_DT, float(dt)))
    acc = state.accumulator + dt
    steps = 0
    # Tolerance keeps exact multiples of FRAME_DT from losing a frame to rounding
    while acc + 1e-9 >= FRAME_DT and steps < max_steps:
        state = step(state, inp, noise)
        acc -= FRAME_DT
        steps += 1
    return replace(state, accumulator=max(0.0, acc))
