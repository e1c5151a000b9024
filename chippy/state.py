#!/usr/bin/env python3

"""
Machine State

Everything the CPU can change lives here: the 16 V registers, main memory,
the index register, the program counter, the call stack, both timers, the
keypad latch and the framebuffer.  The state has no behaviour of its own
beyond construction (which writes the built-in hexadecimal glyphs into
memory) and a handful of entry points used by the driver.

Register Vf is both a general purpose register and the flag register.  Any
instruction producing a carry, borrow or collision overwrites it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import (
    ADDRESS_MASK, GLYPH_TABLE, GLYPH_TABLE_START, MEMORY_SIZE, NUM_KEYS, PROGRAM_MAX_SIZE, PROGRAM_START, STACK_DEPTH,
    VID_HEIGHT, VID_WIDTH
)
from .framebuffer import Framebuffer
from .ram import RAM
from .stack import Stack


class MachineState:
    def __init__(self):
        # Bytearrays are mutable, so this should be fast when a register is updated.  Writes outside 0-255 raise.
        self.v = memoryview(bytearray(16))
        self.i = 0    # Index register
        self.pc = PROGRAM_START
        self.dt = 0   # Delay timer
        self.st = 0   # Sound timer

        self.ram = RAM()
        self.ram.resize(MEMORY_SIZE)
        self.ram.write_block(GLYPH_TABLE_START, GLYPH_TABLE)

        self.stack = Stack(STACK_DEPTH)
        self.keypad = [False] * NUM_KEYS
        self.framebuffer = Framebuffer(VID_WIDTH, VID_HEIGHT)

    def load_program(self, data):
        # Anything past the end of memory is silently discarded
        return self.ram.load_block(PROGRAM_START, data[:PROGRAM_MAX_SIZE])

    def set_keypad(self, keys):
        # The input collaborator always supplies 16 entries, so no length check here
        self.keypad = list(keys)

    def take_display_dirty(self):
        return self.framebuffer.take_dirty()

    def get_display(self):
        return self.framebuffer.snapshot()

    def inc_pc(self):
        self.pc = (self.pc + 2) & ADDRESS_MASK

    def dec_pc(self):
        # Only used to re-run instructions (e.g. keypress wait)
        self.pc = (self.pc - 2) & ADDRESS_MASK
