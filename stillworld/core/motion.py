# stillworld/core/motion.py
"""
Input -> motion for the player marker.

Gentle start/stop: input accelerates velocity, velocity is capped and
decays by friction every frame, tiny components snap to rest, and the
position is clamped to the world with velocity damped on the blocked axis.
"""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Tuple

import stillworld.utils.settings as settings
from stillworld.core.state import FrameInput, Player
from stillworld.utils.camera_utils import clamp


def input_direction(inp: FrameInput) -> Tuple[float, float]:
    """Unit (or zero) direction so diagonal speed matches axis-aligned speed."""
    dx = int(inp.right) - int(inp.left)
    dy = int(inp.down) - int(inp.up)
    mag = math.sqrt(dx * dx + dy * dy)
    if mag == 0:
        return 0.0, 0.0
    return dx / mag, dy / mag


def speed_limits(slow: bool) -> Tuple[float, float]:
    """(acceleration, max speed) for normal or slow-walk movement."""
    if slow:
        return (
            settings.MOVE_ACCEL * settings.MOVE_SLOW_ACCEL_MULT,
            settings.MOVE_MAX_SPEED * settings.MOVE_SLOW_MULT,
        )
    return settings.MOVE_ACCEL, settings.MOVE_MAX_SPEED


def update_player(
    player: Player,
    inp: FrameInput,
    world_size: Tuple[float, float] = (settings.WORLD_WIDTH, settings.WORLD_HEIGHT),
) -> Player:
    """Advance the player by one frame and return the new Player."""
    nx, ny = input_direction(inp)
    accel, max_speed = speed_limits(inp.slow)

    vx = player.vx + nx * accel
    vy = player.vy + ny * accel

    sp = math.sqrt(vx * vx + vy * vy)
    if sp > max_speed:
        k = max_speed / sp
        vx *= k
        vy *= k

    vx *= settings.MOVE_FRICTION
    vy *= settings.MOVE_FRICTION

    if abs(vx) < settings.MOVE_STOP_EPS:
        vx = 0.0
    if abs(vy) < settings.MOVE_STOP_EPS:
        vy = 0.0

    raw_x = player.x + vx
    raw_y = player.y + vy

    # Hard clamp: position is clipped exactly to the world, velocity damped
    x = clamp(raw_x, 0.0, float(world_size[0]))
    y = clamp(raw_y, 0.0, float(world_size[1]))
    if x != raw_x:
        vx *= settings.EDGE_DAMP
    if y != raw_y:
        vy *= settings.EDGE_DAMP

    return replace(player, x=x, y=y, vx=vx, vy=vy)
