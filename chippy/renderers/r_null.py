#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output.  Without a renderer, performance data will also not be shown.

The driver passes in a complete snapshot of the framebuffer (rows of booleans)
whenever the screen has changed.  The null renderer just keeps hold of the most
recent one, which is handy for tests and for dumping the screen on exit.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.last_frame = None
        self.title = ""
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def draw(self, frame):
        if len(frame) != self.height or any(len(row) != self.width for row in frame):
            raise RendererError("Frame does not match the display resolution")

        self.last_frame = frame

    def refresh_display(self):
        pass

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
