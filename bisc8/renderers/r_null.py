#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output, or to run a ROM headless.  Without a renderer, performance data
will also not be shown.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


def hex_to_rgb(colour):
    # Converts '#RRGGBB' into an (R, G, B) tuple
    if not colour.startswith("#") or len(colour) != 7:
        raise RendererError("Colours must be given as '#' followed by 6 hex digits, e.g. #FFFFFF.")

    try:
        return tuple(int(colour[pos:pos + 2], 16) for pos in range(1, 7, 2))
    except ValueError:
        raise RendererError("Invalid colour {} defined.".format(colour)) from None


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def set_pixel(self, x, y, lit):  # pylint: disable=unused-argument
        pass

    def refresh_display(self, content_changed=False):
        pass

    def set_title(self, title):
        pass

    def shutdown(self):
        pass
