#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chippy.framebuffer import Framebuffer, FramebufferError


class TestFrameBuffer(unittest.TestCase):
    def setUp(self):
        self.framebuffer = Framebuffer(4, 5)

    def test_framebuffer_size(self):
        self.assertEqual((4, 5), self.framebuffer.get_vid_size())
        self.assertEqual((64, 32), Framebuffer().get_vid_size())
        self.assertRaises(FramebufferError, Framebuffer, 0, 32)
        self.assertRaises(FramebufferError, Framebuffer, 64, -1)

    def test_framebuffer_writes(self):
        fb = self.framebuffer
        pixels = fb.ram_bank
        self.assertFalse(fb.xor_pixel(0, 0))
        self.assertEqual("0100000000000000000000000000000000000000", pixels.mem.hex())
        self.assertFalse(fb.xor_pixel(1, 1))
        self.assertEqual("0100000000010000000000000000000000000000", pixels.mem.hex())
        self.assertTrue(fb.xor_pixel(1, 1))  # Collision
        self.assertEqual("0100000000000000000000000000000000000000", pixels.mem.hex())

    def test_framebuffer_wrapping(self):
        fb = self.framebuffer
        fb.xor_pixel(4, 5)  # Both edges wrap, back to the origin
        self.assertTrue(fb.get_pixel(0, 0))
        fb.xor_pixel(-1, 6)
        self.assertTrue(fb.get_pixel(3, 1))
        self.assertTrue(fb.xor_pixel(8, 10))
        self.assertFalse(fb.get_pixel(0, 0))

    def test_framebuffer_clear(self):
        fb = self.framebuffer
        fb.xor_pixel(2, 3)
        self.assertFalse(fb.take_dirty())  # Pixel writes alone don't mark the screen
        fb.clear()
        self.assertEqual("00" * 20, fb.ram_bank.mem.hex())
        self.assertTrue(fb.take_dirty())
        self.assertFalse(fb.take_dirty())

    def test_framebuffer_mark_dirty(self):
        fb = self.framebuffer
        fb.mark_dirty()
        fb.mark_dirty()
        self.assertTrue(fb.take_dirty())
        self.assertFalse(fb.take_dirty())

    def test_framebuffer_snapshot(self):
        fb = self.framebuffer
        fb.xor_pixel(3, 0)
        fb.xor_pixel(0, 4)
        snapshot = fb.snapshot()
        self.assertEqual(5, len(snapshot))
        self.assertEqual((False, False, False, True), snapshot[0])
        self.assertEqual((True, False, False, False), snapshot[4])

        # Later writes don't leak into an earlier snapshot
        fb.xor_pixel(3, 0)
        self.assertTrue(snapshot[0][3])

    def test_framebuffer_to_text(self):
        fb = self.framebuffer
        fb.xor_pixel(0, 0)
        fb.xor_pixel(3, 4)
        self.assertEqual("x   \n    \n    \n    \n   x", fb.to_text())
        self.assertEqual("#...\n....\n....\n....\n...#", fb.to_text("#", "."))
