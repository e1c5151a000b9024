#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Chippy-8 Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEMORY_SIZE = 0x1000
ADDRESS_MASK = 0xFFF    # Program counter and memory accesses stay inside 4K
INDEX_MASK = 0xFFFF     # The index register itself is 16 bits wide
PROGRAM_START = 0x200
PROGRAM_MAX_SIZE = MEMORY_SIZE - PROGRAM_START
GLYPH_TABLE_START = 0x50
GLYPH_SIZE = 5

# Display and input
VID_WIDTH = 64
VID_HEIGHT = 32
NUM_KEYS = 0x10
STACK_DEPTH = 16

# Hexadecimal digit sprites 0-F, 5 rows each
GLYPH_TABLE = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))

# Default mappings for keys 0-F.  Note that the keyscans (on a UK QWERTY keyboard) and ASCII characters for these
# are the same code, laid out as 1234/QWER/ASDF/ZXCV
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Default cycle rate when not overridden on the command line
DEFAULT_CLOCK_SPEED = 500

DISPLAY_FREQ = 60.0  # Host events are drained at display rate, not at clock speed
DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ

# Instruction set dialects, mapped to their module names under chippy.isa
SUPPORTED_ISAS = {
    "chip8":  "isa_chip8",   # Base instruction set
    "cosmac": "isa_cosmac",  # RCA COSMAC VIP interpreter behaviour
    "amiga":  "isa_amiga"    # Amiga interpreter, with an index overflow flag
}
