# stillworld/utils/surface_cache.py
from __future__ import annotations

from typing import Callable, Dict, Hashable, Tuple

import pygame

RGBA = Tuple[int, int, int, int]


class SurfaceCache:
    """
    Small cache of pre-built translucent sprites.

    pygame.draw writes pixels without blending, so anything drawn with alpha is
    built once on an SRCALPHA surface and blitted (blits do blend).
    """

    def __init__(self, max_items: int = 1024) -> None:
        self._max = max_items
        self._cache: Dict[Hashable, pygame.Surface] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def _trim(self) -> None:
        # simple FIFO eviction
        if len(self._cache) > self._max:
            remove = len(self._cache) - self._max
            for k in list(self._cache.keys())[:remove]:
                self._cache.pop(k, None)

    def get(self, key: Hashable, build: Callable[[], pygame.Surface]) -> pygame.Surface:
        s = self._cache.get(key)
        if s is None:
            s = build()
            self._cache[key] = s
            self._trim()
        return s

    def ellipse(self, w: int, h: int, rgba: RGBA) -> pygame.Surface:
        w, h = max(1, int(w)), max(1, int(h))
        key = ("ellipse", w, h, tuple(rgba))

        def build() -> pygame.Surface:
            s = pygame.Surface((w, h), pygame.SRCALPHA)
            pygame.draw.ellipse(s, rgba, s.get_rect())
            return s

        return self.get(key, build)

    def circle(self, diameter: int, rgba: RGBA) -> pygame.Surface:
        return self.ellipse(diameter, diameter, rgba)

    def rounded_rect(self, w: int, h: int, radius: int, rgba: RGBA) -> pygame.Surface:
        w, h = max(1, int(w)), max(1, int(h))
        key = ("rrect", w, h, int(radius), tuple(rgba))

        def build() -> pygame.Surface:
            s = pygame.Surface((w, h), pygame.SRCALPHA)
            pygame.draw.rect(s, rgba, s.get_rect(), border_radius=int(radius))
            return s

        return self.get(key, build)

    def scale(self, surface: pygame.Surface, w: int, h: int, smooth: bool = True) -> pygame.Surface:
        # Not cached: callers scale a fresh frame every time
        if smooth:
            return pygame.transform.smoothscale(surface, (int(w), int(h)))
        return pygame.transform.scale(surface, (int(w), int(h)))
