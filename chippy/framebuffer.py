#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are only drawn to the actual display (the host
rendering system) when the driver notices the framebuffer has changed.  The
framebuffer never talks to a renderer itself.  Instead, it keeps a dirty flag
which is set by anything that alters the screen, and cleared only when it is
read with take_dirty().

Unlike other computers, programs for this system cannot write directly into
video RAM.  Instead, sprites are drawn to the screen using an XOR method.
Pixel coordinates wrap around both edges independently, so a sprite drawn
partly off the right-hand side reappears on the left.

Collisions (where any pixel was set, but was unset by an XOR), are reported
back to the caller.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT
from .ram import RAM


class FramebufferError(Exception):
    pass


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        if vid_width <= 0 or vid_height <= 0:
            raise FramebufferError("Display dimensions must be positive")

        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.ram_bank = RAM()
        self.ram_bank.resize(self.vid_size)  # One byte per pixel, 0 = off, 1 = on
        self.dirty = False

    def clear(self):
        self.ram_bank.clear()
        self.dirty = True

    def xor_pixel(self, x, y):
        # Returns True if a lit pixel was switched off
        vram_loc = (y % self.vid_height) * self.vid_width + (x % self.vid_width)
        pixel = self.ram_bank.read(vram_loc)
        self.ram_bank.write(vram_loc, pixel ^ 1)
        return pixel != 0

    def get_pixel(self, x, y):
        return self.ram_bank.read((y % self.vid_height) * self.vid_width + (x % self.vid_width)) != 0

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def mark_dirty(self):
        self.dirty = True

    def take_dirty(self):
        # Consume-once.  A second read straight afterwards will return False.
        dirty = self.dirty
        self.dirty = False
        return dirty

    def snapshot(self):
        # Read-only copy, row-major, origin top-left
        mem = self.ram_bank.mem
        width = self.vid_width
        return tuple(
            tuple(pixel != 0 for pixel in mem[row:row + width]) for row in range(0, self.vid_size, width)
        )

    def to_text(self, on="x", off=" "):
        return "\n".join("".join(on if pixel else off for pixel in row) for row in self.snapshot())
