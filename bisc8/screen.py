#!/usr/bin/env python3

"""
Screen Emulator

Pixels are written here by the CPU, and a copy is handed to the driver whenever
the contents change.  The driver decides when (and whether) to actually show it
using the host rendering system.

Programs cannot write directly into video RAM.  Instead, sprites are drawn to
the screen using an XOR method, one byte per row, 8 pixels wide.  The starting
position of a sprite wraps around the screen, but anything that would then run
off the right or bottom edge is clipped.

A collision is reported when any pixel that was set is unset by the XOR.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT

WIDTH = SCREEN_WIDTH
HEIGHT = SCREEN_HEIGHT


class ScreenError(Exception):
    pass


class Screen:
    def __init__(self):
        # One byte per pixel, 0 or 1, row-major from the top-left corner
        self.vram = bytearray(WIDTH * HEIGHT)

    def clear(self):
        self.vram[:] = bytes(WIDTH * HEIGHT)

    def draw_sprite(self, sprite, x, y):
        if len(sprite) > 0xF:
            raise ScreenError("Sprites can be no more than 15 rows high")

        x %= WIDTH
        y %= HEIGHT
        vram = self.vram
        erased = False

        for row, sprite_byte in enumerate(sprite):
            scr_y = y + row

            if scr_y >= HEIGHT:
                break

            vram_row = scr_y * WIDTH

            for col in range(8):
                scr_x = x + col

                if scr_x >= WIDTH:
                    break

                if sprite_byte & (0x80 >> col):
                    vram_loc = vram_row + scr_x

                    if vram[vram_loc]:
                        erased = True

                    vram[vram_loc] ^= 1

        return erased

    def pixel(self, x, y):
        return self.vram[y * WIDTH + x] != 0

    def copy(self):
        screen = Screen()
        screen.vram[:] = self.vram
        return screen

    def __eq__(self, other):
        if not isinstance(other, Screen):
            return NotImplemented

        return self.vram == other.vram

    def __repr__(self):
        return "\n".join(
            "".join("#" if self.vram[y * WIDTH + x] else "." for x in range(WIDTH)) for y in range(HEIGHT)
        )
