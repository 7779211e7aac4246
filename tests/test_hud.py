# tests/test_hud.py
from __future__ import annotations

import unittest
from dataclasses import replace

import pygame

from stillworld.core import simulation
from stillworld.core.state import CameraState, Options, Player
from stillworld.ui.hud import HUD, TITLE, hud_lines


class TestHudLines(unittest.TestCase):
    def test_start_lines(self):
        lines = hud_lines(simulation.new_state())
        self.assertEqual(lines[0], TITLE)
        self.assertEqual(
            lines[1],
            "[M] Reduced Motion: OFF   [H] High Contrast: OFF   [R] Reset",
        )
        self.assertEqual(
            lines[2],
            "Mood: Dawn   Player(world): 300, 300   CamCenter(world): 300, 300",
        )

    def test_toggles_shown(self):
        s = simulation.new_state(Options(reduced_motion=True, high_contrast=True))
        self.assertEqual(
            hud_lines(s)[1],
            "[M] Reduced Motion: ON   [H] High Contrast: ON   [R] Reset",
        )

    def test_coordinates_truncate(self):
        s = replace(
            simulation.new_state(),
            player=Player(x=1234.9, y=55.5),
            camera=CameraState(x=1000.7, y=100.2),
        )
        self.assertEqual(
            hud_lines(s)[2],
            "Mood: Meadow   Player(world): 1234, 55   CamCenter(world): 1400, 340",
        )

    def test_overscrolled_camera_reads_end_zone(self):
        s = replace(simulation.new_state(), camera=CameraState(x=1660, y=0))
        self.assertTrue(hud_lines(s)[2].startswith("Mood: Dusk"))


class TestHudDraw(unittest.TestCase):
    def test_draws_panel(self):
        surf = pygame.Surface((800, 480))
        surf.fill((0, 0, 0))
        HUD().draw(surf, simulation.new_state())
        # panel sits inside the padding
        self.assertNotEqual(surf.get_at((400, 50))[:3], (0, 0, 0))
        self.assertEqual(surf.get_at((5, 5))[:3], (0, 0, 0))


if __name__ == "__main__":
    unittest.main()
