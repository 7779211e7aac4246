# stillworld/ui/hud.py
from __future__ import annotations

from typing import List, Optional

import pygame

import stillworld.utils.settings as settings
from stillworld.core.camera import view_center
from stillworld.core.state import WorldState
from stillworld.utils.camera_utils import clamp
from stillworld.utils.surface_cache import SurfaceCache
from stillworld.world.zones import ZONE_NAMES, zone_at

TITLE = "Reflective camera world (calm travel + pause). Move: WASD/Arrows. SHIFT: slow walk."


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"


def hud_lines(state: WorldState) -> List[str]:
    """The three HUD lines for a state (screen-space text, no drawing)."""
    cx, cy = (int(v) for v in view_center(state.camera))
    # Camera may overscroll; the mood is read from inside the world
    zone = zone_at(clamp(cx, 0, settings.WORLD_WIDTH - 1))
    opt = state.options
    return [
        TITLE,
        f"[M] Reduced Motion: {_on_off(opt.reduced_motion)}   "
        f"[H] High Contrast: {_on_off(opt.high_contrast)}   [R] Reset",
        f"Mood: {ZONE_NAMES[zone]}   "
        f"Player(world): {int(state.player.x)}, {int(state.player.y)}   "
        f"CamCenter(world): {cx}, {cy}",
    ]


class HUD:
    """Readable panel in screen space, drawn after the world."""

    def __init__(self, cache: Optional[SurfaceCache] = None) -> None:
        self._cache = cache or SurfaceCache()
        self._font = pygame.font.SysFont(settings.HUD_FONT_NAME, settings.HUD_FONT_SIZE)

    def draw(self, surface: pygame.Surface, state: WorldState) -> None:
        hc = state.options.high_contrast
        pad = settings.HUD_PADDING
        w, h = settings.HUD_PANEL_SIZE
        panel_color = settings.HUD_PANEL_COLOR_HIGH_CONTRAST if hc else settings.HUD_PANEL_COLOR
        text_color = settings.HUD_TEXT_COLOR_HIGH_CONTRAST if hc else settings.HUD_TEXT_COLOR

        surface.blit(self._cache.rounded_rect(w, h, settings.HUD_PANEL_RADIUS, panel_color), (pad, pad))

        for line, offset in zip(hud_lines(state), settings.HUD_LINE_OFFSETS):
            txt = self._font.render(line, True, text_color)
            # Offsets are text baselines; blit from the top
            surface.blit(txt, (pad + 10, pad + offset - self._font.get_ascent()))
