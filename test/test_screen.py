#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from bisc8.screen import Screen, ScreenError, WIDTH, HEIGHT


class TestScreen(unittest.TestCase):
    def setUp(self):
        self.screen = Screen()

    def _lit_pixels(self):
        return [(x, y) for y in range(HEIGHT) for x in range(WIDTH) if self.screen.pixel(x, y)]

    def test_screen_init(self):
        self.assertEqual((64, 32), (WIDTH, HEIGHT))
        self.assertEqual([], self._lit_pixels())

    def test_screen_draw_sprite(self):
        self.assertFalse(self.screen.draw_sprite(b"\x81\x40", 2, 3))
        self.assertEqual([(2, 3), (9, 3), (3, 4)], self._lit_pixels())

    def test_screen_draw_collision(self):
        self.assertFalse(self.screen.draw_sprite(b"\xF0", 0, 0))
        # Overlaps a single lit pixel, which is erased
        self.assertTrue(self.screen.draw_sprite(b"\x18", 0, 0))
        self.assertEqual([(0, 0), (1, 0), (2, 0), (4, 0)], self._lit_pixels())

    def test_screen_draw_no_collision_when_lighting(self):
        self.screen.draw_sprite(b"\xF0", 0, 0)
        self.assertFalse(self.screen.draw_sprite(b"\x0F", 0, 0))
        self.assertEqual(8, len(self._lit_pixels()))

    def test_screen_redraw_erases(self):
        self.screen.draw_sprite(b"\xFF\xFF", 10, 10)
        self.assertTrue(self.screen.draw_sprite(b"\xFF\xFF", 10, 10))
        self.assertEqual([], self._lit_pixels())

    def test_screen_start_wraps(self):
        self.screen.draw_sprite(b"\x80", WIDTH + 1, HEIGHT + 2)
        self.assertEqual([(1, 2)], self._lit_pixels())

    def test_screen_clips_right_edge(self):
        self.screen.draw_sprite(b"\xFF", 60, 0)
        self.assertEqual([(60, 0), (61, 0), (62, 0), (63, 0)], self._lit_pixels())

    def test_screen_clips_bottom_edge(self):
        self.screen.draw_sprite(b"\x80\x80\x80\x80", 0, 30)
        self.assertEqual([(0, 30), (0, 31)], self._lit_pixels())

    def test_screen_clipped_pixels_cannot_collide(self):
        self.screen.draw_sprite(b"\x80", 0, 0)
        self.assertFalse(self.screen.draw_sprite(b"\xFF", 63, 0))

    def test_screen_sprite_too_tall(self):
        self.assertRaises(ScreenError, self.screen.draw_sprite, bytes(16), 0, 0)

    def test_screen_clear(self):
        self.screen.draw_sprite(b"\xFF" * 15, 0, 0)
        self.screen.clear()
        self.assertEqual([], self._lit_pixels())

    def test_screen_copy(self):
        self.screen.draw_sprite(b"\xAA", 5, 5)
        screen_copy = self.screen.copy()
        self.assertEqual(self.screen, screen_copy)
        self.screen.clear()
        self.assertNotEqual(self.screen, screen_copy)
        self.assertTrue(screen_copy.pixel(5, 5))
