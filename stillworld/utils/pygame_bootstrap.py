# stillworld/utils/pygame_bootstrap.py
from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

import pygame

logger = logging.getLogger(__name__)


def is_headless_requested() -> bool:
    """True when CI or the STILLWORLD_HEADLESS switch asks for dummy SDL drivers."""
    return (
        os.environ.get("STILLWORLD_HEADLESS") == "1"
        or os.environ.get("CI") == "true"
        or os.environ.get("SDL_VIDEODRIVER") == "dummy"
    )


def configure_environment(headless: Optional[bool] = None) -> bool:
    """
    SDL/Pygame defaults, applied before the display is created.
    Returns the effective headless flag.
    """
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    if headless is None:
        headless = is_headless_requested()
    if headless:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    return headless


def init_pygame_display(
    size: Tuple[int, int],
    *,
    caption: str = "Stillworld",
    headless: Optional[bool] = None,
) -> Tuple[pygame.Surface, pygame.time.Clock]:
    """
    Robust pygame bootstrap:
      - Configures 'dummy' drivers in CI/headless runs (no window/audio device required).
      - Falls back to the dummy driver if a real window cannot be opened.
      - Makes sure fonts are initialized for the HUD.

    Returns:
        (display surface, clock)
    """
    configure_environment(headless)

    pygame.init()
    if not pygame.display.get_init():
        pygame.display.init()

    try:
        surf = pygame.display.set_mode(size)
    except pygame.error as exc:
        logger.warning("Display init failed (%s); falling back to SDL dummy driver.", exc)
        os.environ["SDL_VIDEODRIVER"] = "dummy"
        pygame.display.quit()
        pygame.display.init()
        surf = pygame.display.set_mode(size)

    pygame.display.set_caption(caption)

    if not pygame.font.get_init():
        pygame.font.init()

    logger.debug("Display ready: %dx%d driver=%s", size[0], size[1], pygame.display.get_driver())
    return surf, pygame.time.Clock()
