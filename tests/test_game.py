# tests/test_game.py
"""
Game loop wiring and the safe entrypoint, all under SDL dummy drivers.
"""
from __future__ import annotations

import unittest

import pygame
import pytest

import stillworld.utils.settings as settings
from stillworld.core import safe_main
from stillworld.core.game import Game
from stillworld.core.simulation import FRAME_DT
from stillworld.core.state import FrameInput, Options


def keydown(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestGameEvents(unittest.TestCase):
    def setUp(self):
        self.game = Game(headless=True)

    def test_starts_with_default_state(self):
        self.assertEqual(self.game.screen.get_size(), (settings.VIEW_WIDTH, settings.VIEW_HEIGHT))
        self.assertEqual(self.game.state.frame, 0)
        self.assertFalse(self.game.running)

    def test_options_passed_through(self):
        g = Game(Options(high_contrast=True), headless=True)
        self.assertTrue(g.state.options.high_contrast)

    def test_toggle_keys(self):
        self.game.handle_event(keydown(pygame.K_m))
        self.game.handle_event(keydown(pygame.K_h))
        self.assertTrue(self.game.state.options.reduced_motion)
        self.assertTrue(self.game.state.options.high_contrast)
        self.game.handle_event(keydown(pygame.K_h))
        self.assertFalse(self.game.state.options.high_contrast)

    def test_reset_key(self):
        for _ in range(30):
            self.game.tick(FRAME_DT, FrameInput(right=True))
        self.assertGreater(self.game.state.player.x, settings.START_X)
        self.game.handle_event(keydown(pygame.K_r))
        self.assertEqual(self.game.state.player.x, settings.START_X)
        self.assertEqual(self.game.state.drift_fade, 0.0)

    def test_escape_and_window_close_stop(self):
        self.game._running = True
        self.game.handle_event(keydown(pygame.K_ESCAPE))
        self.assertFalse(self.game.running)
        self.game._running = True
        self.game.handle_event(pygame.event.Event(pygame.QUIT))
        self.assertFalse(self.game.running)

    def test_unbound_key_ignored(self):
        before = self.game.state
        self.game.handle_event(keydown(pygame.K_F5))
        self.assertEqual(self.game.state, before)

    def test_tick_advances_frames(self):
        self.game.tick(2 * FRAME_DT, FrameInput(down=True))
        self.assertEqual(self.game.state.frame, 2)
        self.assertGreater(self.game.state.player.y, settings.START_Y)

    def test_render_smoke(self):
        self.game.render()


@pytest.mark.usefixtures("reinit_pygame")
class TestGameRun(unittest.TestCase):
    def test_run_stops_after_max_frames(self):
        g = Game(headless=True)
        self.assertEqual(g.run(max_frames=3), 0)
        self.assertFalse(g.running)


@pytest.mark.usefixtures("reinit_pygame")
def test_main_headless_frames():
    assert safe_main.main(["--headless", "--frames", "2", "--reduced-motion"]) == safe_main.EXIT_OK


def test_parser_defaults():
    args = safe_main.build_parser().parse_args([])
    assert args.frames == 0
    assert args.seed == settings.WORLD_SEED
    assert not args.headless
    assert args.log_level == "INFO"


@pytest.mark.usefixtures("reinit_pygame")
def test_crash_writes_report(monkeypatch, tmp_path):
    import stillworld.core.game as game_mod

    class Boom:
        def __init__(self, *args, **kwargs):
            raise RuntimeError("boom")

    monkeypatch.setattr(game_mod, "Game", Boom)
    monkeypatch.chdir(tmp_path)

    assert safe_main.main(["--headless", "--frames", "1"]) == safe_main.EXIT_CRASH
    reports = list((tmp_path / "logs").glob("crash_*.txt"))
    assert len(reports) == 1
    text = reports[0].read_text(encoding="utf-8")
    assert "RuntimeError: boom" in text


def test_write_crash_report_outside_exception(tmp_path):
    path = safe_main.write_crash_report(str(tmp_path / "out"))
    assert path.exists()
    assert path.name.startswith("crash_")


def test_configure_logging_quiets_noise_library():
    import logging

    from stillworld.utils.logging_setup import configure_logging

    configure_logging(logging.DEBUG)
    assert logging.getLogger("opensimplex").level == logging.WARNING
    assert logging.getLogger().level == logging.DEBUG
