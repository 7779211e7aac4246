# stillworld/ui/renderer.py
"""
Draws a WorldState: mood bands, landmarks, ambient details, vignette, player,
breathing zoom, then the HUD in screen space.

The world is drawn onto an offscreen view-sized surface translated by the
camera, so the breathing zoom can scale the whole world layer about the view
center before it reaches the display.
"""
from __future__ import annotations

import logging
import math
from typing import Tuple

import pygame

import stillworld.utils.settings as settings
from stillworld.core.camera import breath_zoom, view_center
from stillworld.core.noise_adapter import NoiseFn
from stillworld.core.state import WorldState
from stillworld.ui.hud import HUD
from stillworld.utils.camera_utils import clamp
from stillworld.utils.surface_cache import SurfaceCache
from stillworld.world.decor import Decor
from stillworld.world.zones import Palette, get_palette, zone_at

logger = logging.getLogger(__name__)

WAVE_SPACING = 180
WAVE_FIRST_Y = 120
VIGNETTE_DIAMETER = 520


def _lerp_rgb(a: Tuple[int, int, int], b: Tuple[int, int, int], t: float) -> Tuple[int, int, int]:
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


class Renderer:
    def __init__(
        self,
        decor: Decor,
        noise: NoiseFn,
        view_size: Tuple[int, int] = (settings.VIEW_WIDTH, settings.VIEW_HEIGHT),
        world_size: Tuple[int, int] = (settings.WORLD_WIDTH, settings.WORLD_HEIGHT),
    ) -> None:
        self.decor = decor
        self.noise = noise
        self.view_w, self.view_h = int(view_size[0]), int(view_size[1])
        self.world_w, self.world_h = int(world_size[0]), int(world_size[1])

        self._cache = SurfaceCache()
        self._world_layer = pygame.Surface((self.view_w, self.view_h))
        self._overlay = pygame.Surface((self.view_w, self.view_h), pygame.SRCALPHA)
        self.hud = HUD(self._cache)

    # ------------------------------------------------------------------ #
    # Frame
    # ------------------------------------------------------------------ #

    def draw(self, surface: pygame.Surface, state: WorldState) -> None:
        hc = state.options.high_contrast
        surface.fill(settings.BG_COLOR_HIGH_CONTRAST if hc else settings.BG_COLOR)

        layer = self._world_layer
        layer.fill(settings.BG_COLOR_HIGH_CONTRAST if hc else settings.BG_COLOR)
        cam = (state.camera.x, state.camera.y)

        self._draw_bands(layer, cam, hc)
        self._draw_landmarks(layer, cam, state.frame, hc)
        self._draw_ambient(layer, cam, state)
        self._draw_vignette(layer, cam, state)
        self._draw_player(layer, cam, state)

        z = breath_zoom(state.frame, state.options.reduced_motion)
        if z == 1.0:
            surface.blit(layer, (0, 0))
        else:
            w, h = round(self.view_w * z), round(self.view_h * z)
            scaled = self._cache.scale(layer, w, h)
            surface.blit(scaled, ((self.view_w - w) // 2, (self.view_h - h) // 2))

        self.hud.draw(surface, state)

    # ------------------------------------------------------------------ #
    # World layers
    # ------------------------------------------------------------------ #

    def _band_surface(self, zone: int, hc: bool) -> pygame.Surface:
        third = self.world_w // 3

        def build() -> pygame.Surface:
            pal: Palette = get_palette(zone, hc)
            band = pygame.Surface((third, self.world_h))
            for y in range(self.world_h):
                t = y / max(1, self.world_h - 1)
                pygame.draw.line(band, _lerp_rgb(pal.bg_top, pal.bg_bottom, t), (0, y), (third, y))
            # Gentle haze to reduce flatness
            haze = pygame.Surface((third, self.world_h), pygame.SRCALPHA)
            haze.fill(pal.haze)
            band.blit(haze, (0, 0))
            return band.convert() if pygame.display.get_surface() else band

        return self._cache.get(("band", zone, hc, third, self.world_h), build)

    def _draw_bands(self, layer: pygame.Surface, cam: Tuple[float, float], hc: bool) -> None:
        third = self.world_w // 3
        for zone in range(3):
            x = zone * third
            layer.blit(self._band_surface(zone, hc), (round(x - cam[0]), round(-cam[1])))
        if hc:
            # Boundary hints (subtle, not a grid)
            edge = self._cache.get(
                ("edge", self.world_h),
                lambda: self._solid(1, self.world_h, (255, 255, 255, 18)),
            )
            for zone in range(3):
                layer.blit(edge, (round(zone * third - cam[0]), round(-cam[1])))

    def _visible(self, x: float, y: float, r: float, cam: Tuple[float, float]) -> bool:
        sx, sy = x - cam[0], y - cam[1]
        return -r <= sx <= self.view_w + r and -r <= sy <= self.view_h + r

    def _draw_landmarks(self, layer: pygame.Surface, cam: Tuple[float, float], frame: int, hc: bool) -> None:
        for lm in self.decor.landmarks:
            if not self._visible(lm.x, lm.y, lm.r * 1.2, cam):
                continue
            pal = get_palette(zone_at(lm.x, self.world_w), hc)
            # Very slow shimmer (non-flashy)
            shimmer = 0.08 + 0.05 * math.sin(frame * 0.006 + lm.t)

            w, h = lm.r * 2.2, lm.r * 1.7
            layer.blit(
                self._cache.ellipse(w, h, pal.land_a),
                (round(lm.x - w / 2 - cam[0]), round(lm.y - h / 2 - cam[1])),
            )

            alpha_b = int(clamp(pal.land_b[3] * (0.8 + shimmer), 0, 255))
            w2, h2 = lm.r * 1.3, lm.r * 0.9
            cx, cy = lm.x + lm.r * 0.15, lm.y - lm.r * 0.1
            layer.blit(
                self._cache.ellipse(w2, h2, (*pal.land_b[:3], alpha_b)),
                (round(cx - w2 / 2 - cam[0]), round(cy - h2 / 2 - cam[1])),
            )

    def _draw_ambient(self, layer: pygame.Surface, cam: Tuple[float, float], state: WorldState) -> None:
        hc = state.options.high_contrast
        frame = state.frame
        third = self.world_w / 3

        # Dawn: drifting motes (slow vertical drift + slight sideways wander)
        mote_alpha = 42 if hc else 22
        for m in self.decor.motes:
            oy = (frame * m.speed) % (self.world_h + 80)
            y = m.y + oy - 40
            # Wander is at most 7px, so cull before paying for noise
            if not self._visible(m.x, y, m.r + 7, cam):
                continue
            t = frame * 0.003 + m.n
            x = m.x + (self.noise(t, 1.3) - 0.5) * 14
            d = m.r * 2
            layer.blit(
                self._cache.circle(d, (255, 255, 255, mote_alpha)),
                (round(x - m.r - cam[0]), round(y - m.r - cam[1])),
            )

        overlay = self._overlay
        overlay.fill((0, 0, 0, 0))

        # Meadow: slow "current" lines (wide spacing)
        line_color = (255, 255, 255, 18 if hc else 12)
        for y in range(WAVE_FIRST_Y, self.world_h, WAVE_SPACING):
            wave = math.sin(frame * 0.004 + y * 0.02) * 18
            pygame.draw.line(
                overlay,
                line_color,
                (third + 60 - cam[0], y + wave - cam[1]),
                (third * 2 - 60 - cam[0], y - wave - cam[1]),
            )

        # Dusk: slow twinkle, tiny amplitude (no flash)
        for s in self.decor.stars:
            if not self._visible(s.x, s.y, s.r, cam):
                continue
            tw = 0.03 * math.sin(frame * 0.01 + s.phase)
            a = clamp(s.alpha + tw, 0.03, 0.22)
            alpha = int(a * 255 if hc else a * 180)
            pygame.draw.circle(
                overlay, (255, 255, 255, alpha),
                (round(s.x - cam[0]), round(s.y - cam[1])), max(1, round(s.r / 2)),
            )

        layer.blit(overlay, (0, 0))

    def _draw_vignette(self, layer: pygame.Surface, cam: Tuple[float, float], state: WorldState) -> None:
        """Four soft corners around the current view, blitted so they blend."""
        cx, cy = view_center(state.camera, (self.view_w, self.view_h))
        shade = (0, 0, 0, 18 if state.options.high_contrast else 10)
        corner = self._cache.circle(VIGNETTE_DIAMETER, shade)
        r = VIGNETTE_DIAMETER // 2
        for sx in (-1, 1):
            for sy in (-1, 1):
                px = cx + sx * self.view_w * 0.55 - cam[0]
                py = cy + sy * self.view_h * 0.55 - cam[1]
                layer.blit(corner, (round(px) - r, round(py) - r))

    def _draw_player(self, layer: pygame.Surface, cam: Tuple[float, float], state: WorldState) -> None:
        p = state.player
        hc = state.options.high_contrast
        pal = get_palette(zone_at(p.x, self.world_w), hc)
        px, py = p.x - cam[0], p.y - cam[1]

        # Soft shadow under player
        layer.blit(
            self._cache.ellipse(28, 18, (0, 0, 0, 70 if hc else 30)),
            (round(px + 2 - 14), round(py + 6 - 9)),
        )

        half = p.size / 2
        pygame.draw.rect(
            layer, pal.player,
            pygame.Rect(round(px - half), round(py - half), p.size, p.size),
            border_radius=6,
        )

        # Center dot (helps focus)
        layer.blit(
            self._cache.circle(4, (255, 255, 255, 220 if hc else 160)),
            (round(px - 2), round(py - 2)),
        )

    @staticmethod
    def _solid(w: int, h: int, rgba) -> pygame.Surface:
        s = pygame.Surface((w, h), pygame.SRCALPHA)
        s.fill(rgba)
        return s
