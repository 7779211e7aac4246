from __future__ import annotations
import os
import sys
from pathlib import Path
import pytest

# Ensure repo root is importable (so `import stillworld...` works without install)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless Pygame setup
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


def init_headless_pygame() -> None:
    import pygame
    pygame.init()
    # a tiny hidden surface lets convert() and fonts work
    if pygame.display.get_surface() is None:
        pygame.display.set_mode((1, 1))


@pytest.fixture(scope="session", autouse=True)
def _init_pygame():
    init_headless_pygame()
    yield
    import pygame
    pygame.quit()


@pytest.fixture
def reinit_pygame():
    """For tests that run the game loop (which calls pygame.quit on exit)."""
    yield
    init_headless_pygame()


class FlatNoise:
    """Noise stub: constant 0.5 means zero drift offset."""

    def __init__(self, value: float = 0.5) -> None:
        self.value = value
        self.calls = []

    def __call__(self, x: float, y: float) -> float:
        self.calls.append((x, y))
        return self.value


@pytest.fixture
def flat_noise() -> FlatNoise:
    return FlatNoise()
