# stillworld/world/zones.py
"""
Three mood zones across the world (left/middle/right thirds) and their
palettes, with high-contrast variants.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import stillworld.utils.settings as settings

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

DAWN, MEADOW, DUSK = 0, 1, 2
ZONE_NAMES = ("Dawn", "Meadow", "Dusk")


@dataclass(frozen=True)
class Palette:
    bg_top: RGB
    bg_bottom: RGB
    haze: RGBA
    land_a: RGBA
    land_b: RGBA
    player: RGB


def zone_at(world_x: float, world_width: float = settings.WORLD_WIDTH) -> int:
    """Zone index for a world x coordinate."""
    third = world_width / 3
    if world_x < third:
        return DAWN
    if world_x < third * 2:
        return MEADOW
    return DUSK


_PALETTES = {
    # Dawn (cool, airy)
    (DAWN, False): Palette(
        bg_top=(0xE6, 0xF0, 0xFF),
        bg_bottom=(0xCF, 0xE2, 0xFF),
        haze=(255, 255, 255, 22),
        land_a=(160, 198, 220, 70),
        land_b=(210, 235, 255, 65),
        player=(56, 120, 255),
    ),
    # Meadow (warm, grounded)
    (MEADOW, False): Palette(
        bg_top=(0xF0, 0xF6, 0xE8),
        bg_bottom=(0xDD, 0xEB, 0xD0),
        haze=(255, 255, 255, 18),
        land_a=(160, 200, 170, 60),
        land_b=(230, 245, 235, 55),
        player=(40, 140, 120),
    ),
    # Dusk (deep, quiet)
    (DUSK, False): Palette(
        bg_top=(0x1F, 0x2A, 0x44),
        bg_bottom=(0x13, 0x1A, 0x2C),
        haze=(0, 0, 0, 16),
        land_a=(90, 110, 160, 55),
        land_b=(160, 170, 210, 35),
        player=(190, 210, 255),
    ),
    # High contrast: stronger separation
    (DAWN, True): Palette(
        bg_top=(0xFF, 0xFF, 0xFF),
        bg_bottom=(0xD7, 0xE6, 0xFF),
        haze=(255, 255, 255, 10),
        land_a=(40, 90, 160, 110),
        land_b=(220, 240, 255, 90),
        player=(0, 120, 255),
    ),
    (MEADOW, True): Palette(
        bg_top=(0xF7, 0xFF, 0xE8),
        bg_bottom=(0xCF, 0xE9, 0xA8),
        haze=(255, 255, 255, 10),
        land_a=(20, 110, 60, 120),
        land_b=(235, 255, 235, 90),
        player=(0, 180, 120),
    ),
    (DUSK, True): Palette(
        bg_top=(0x05, 0x07, 0x0F),
        bg_bottom=(0x00, 0x00, 0x00),
        haze=(0, 0, 0, 6),
        land_a=(140, 170, 255, 120),
        land_b=(220, 230, 255, 90),
        player=(255, 255, 255),
    ),
}


def get_palette(zone: int, high_contrast: bool = False) -> Palette:
    try:
        return _PALETTES[(zone, bool(high_contrast))]
    except KeyError:
        raise ValueError(f"Unknown zone index: {zone!r}") from None
