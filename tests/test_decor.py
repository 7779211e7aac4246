# tests/test_decor.py
from __future__ import annotations

import unittest

import stillworld.utils.settings as settings
from stillworld.world.decor import generate_decor

W, H = settings.WORLD_WIDTH, settings.WORLD_HEIGHT


class TestGenerateDecor(unittest.TestCase):
    def setUp(self):
        self.decor = generate_decor()

    def test_counts(self):
        self.assertEqual(len(self.decor.landmarks), settings.LANDMARK_COUNT)
        self.assertEqual(len(self.decor.motes), settings.MOTE_COUNT)
        self.assertEqual(len(self.decor.stars), settings.STAR_COUNT)

    def test_same_seed_same_layout(self):
        self.assertEqual(generate_decor(), self.decor)

    def test_other_seed_differs(self):
        self.assertNotEqual(generate_decor(seed=6).landmarks, self.decor.landmarks)

    def test_landmarks_inside_margin(self):
        m = settings.LANDMARK_MARGIN
        for lm in self.decor.landmarks:
            self.assertTrue(m <= lm.x <= W - m)
            self.assertTrue(m <= lm.y <= H - m)
            self.assertTrue(20 <= lm.r <= 70)

    def test_motes_live_in_dawn(self):
        for mote in self.decor.motes:
            self.assertTrue(0 <= mote.x <= W / 3)
            self.assertTrue(0.15 <= mote.speed <= 0.55)

    def test_stars_live_in_dusk(self):
        for star in self.decor.stars:
            self.assertTrue(W * 2 / 3 <= star.x <= W)
            self.assertTrue(0.05 <= star.alpha <= 0.2)

    def test_custom_counts(self):
        d = generate_decor(1, (600, 400), landmark_count=3, mote_count=0, star_count=2)
        self.assertEqual((len(d.landmarks), len(d.motes), len(d.stars)), (3, 0, 2))

    def test_tiny_world_rejected(self):
        with self.assertRaises(ValueError):
            generate_decor(1, (150, 1000))


if __name__ == "__main__":
    unittest.main()
