# stillworld/core/game.py
"""
Main game bootstrap and loop for Stillworld.

Each frame: poll events (toggles run synchronously here), snapshot held keys,
advance the simulation by the elapsed time, then draw. The simulation itself
lives in ``stillworld.core.simulation`` and never touches pygame.
"""
from __future__ import annotations

import logging
from typing import Optional

import pygame

import stillworld.utils.settings as settings
from stillworld.core import simulation
from stillworld.core.noise_adapter import DriftNoise
from stillworld.core.state import FrameInput, Options, WorldState
from stillworld.ui.renderer import Renderer
from stillworld.utils.keymap import Keymap
from stillworld.utils.pygame_bootstrap import init_pygame_display
from stillworld.world.decor import generate_decor

logger = logging.getLogger(__name__)


class Game:
    """Main game orchestrator."""

    def __init__(
        self,
        options: Optional[Options] = None,
        *,
        seed: int = settings.WORLD_SEED,
        headless: Optional[bool] = None,
    ) -> None:
        # Window & clock
        self.screen, self.clock = init_pygame_display(
            (settings.VIEW_WIDTH, settings.VIEW_HEIGHT),
            caption=settings.WINDOW_TITLE,
            headless=headless,
        )

        # Subsystems
        self.keymap = Keymap(settings.KEY_BINDINGS)
        self.noise = DriftNoise(seed)
        self.decor = generate_decor(seed)
        self.renderer = Renderer(self.decor, self.noise)

        self.state: WorldState = simulation.new_state(options)
        self._running = False
        logger.info(
            "World %dx%d, view %dx%d, seed=%d, reduced_motion=%s, high_contrast=%s",
            settings.WORLD_WIDTH, settings.WORLD_HEIGHT,
            settings.VIEW_WIDTH, settings.VIEW_HEIGHT, seed,
            self.state.options.reduced_motion, self.state.options.high_contrast,
        )

    @property
    def running(self) -> bool:
        return self._running

    # ------------------------------------------------------------------ #
    # Event handling
    # ------------------------------------------------------------------ #

    def handle_event(self, ev: pygame.event.Event) -> None:
        """Window close, quit key and the comfort toggles."""
        if ev.type == pygame.QUIT:
            self._running = False
            return

        for action in self.keymap.event_to_actions(ev):
            if action == "QUIT":
                self._running = False
            elif action == "TOGGLE_REDUCED_MOTION":
                self.state = simulation.toggle_reduced_motion(self.state)
            elif action == "TOGGLE_HIGH_CONTRAST":
                self.state = simulation.toggle_high_contrast(self.state)
            elif action == "RESET":
                self.state = simulation.reset(self.state)
                logger.info("Reset to start (%d, %d)", settings.START_X, settings.START_Y)

    # ------------------------------------------------------------------ #
    # Update / Render
    # ------------------------------------------------------------------ #

    def poll_input(self) -> FrameInput:
        return self.keymap.frame_input(pygame.key.get_pressed())

    def tick(self, dt: float, inp: Optional[FrameInput] = None) -> None:
        """Advance the world by ``dt`` seconds of held input."""
        if inp is None:
            inp = self.poll_input()
        self.state = simulation.update(self.state, inp, dt, self.noise)

    def render(self) -> None:
        self.renderer.draw(self.screen, self.state)
        pygame.display.flip()

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #

    def run(self, max_frames: int = 0) -> int:
        """Main loop; ``max_frames`` > 0 stops after that many rendered frames."""
        self._running = True
        frames = 0
        while self._running:
            dt = self.clock.tick(settings.FPS) / 1000.0

            for ev in pygame.event.get():
                self.handle_event(ev)
            if not self._running:
                break

            self.tick(dt)
            self.render()

            frames += 1
            if max_frames and frames >= max_frames:
                self._running = False

        logger.info("Stopped after %d frames (simulated %d)", frames, self.state.frame)
        pygame.quit()
        return 0
