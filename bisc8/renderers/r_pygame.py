#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the emulated screen onto an SDL window via PyGame.  Pixels are written
into an offscreen RGB buffer at the emulated resolution, and the buffer is then
stretched (using 'Nearest Neighbour' translation) to fit the window, so each
pixel only has to be drawn once.

Lit pixels are drawn in the foreground colour, and unlit pixels in the
background colour.  Both can be chosen as '#RRGGBB' hex strings.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import Renderer as RendererBase, hex_to_rgb
from ..constants import APP_NAME, DEFAULT_FG, DEFAULT_BG


class Renderer(RendererBase):
    def __init__(self, scale=None, fg=None, bg=None, **kwargs):
        if scale is None:
            scale = 512  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.set_title(APP_NAME)
        self.rgb_buffer = None
        self.render_width = 0
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)

        # Split colours for fast byte-based lookup later.  Index 0 is unlit, 1 is lit.
        self.rgb_map = [
            bytes(hex_to_rgb(DEFAULT_BG if bg is None else bg)),
            bytes(hex_to_rgb(DEFAULT_FG if fg is None else fg))
        ]

        super().__init__(scale)

    def set_resolution(self, width, height):
        total_pixels = width * height
        self.render_width = width
        self.rgb_buffer = memoryview(bytearray(total_pixels * 3))  # 24-bit

        # Fill the offscreen RGB buffer with the background colour
        for pixel in range(total_pixels):
            self._set_rgb(pixel, False)

        # Call superclass method so display size is known on the next refresh
        super().set_resolution(width, height)

        if total_pixels:
            self.refresh_display(True)

    def _set_rgb(self, location, lit):
        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_location = location * 3
        self.rgb_buffer[rgb_location:rgb_location + 3] = self.rgb_map[1 if lit else 0]

    def set_pixel(self, x, y, lit):
        self._set_rgb(y * self.render_width + x, lit)

    def refresh_display(self, content_changed=False):
        if content_changed and self.rgb_buffer:
            # Blit the bytearray straight to the surface
            render_surface = pygame.image.frombuffer(self.rgb_buffer, (self.width, self.height), "RGB")
            scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
            self.display_surface.blit(scaled_win, (0, 0))
            pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame can segfault if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
