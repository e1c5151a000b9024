#!/usr/bin/env python3

"""
CHIP-8 Instruction Set

This serves as a base class for other instruction set dialects.  It holds a
dispatch table of handlers keyed on masked opcodes, a matching table of
mnemonics for the debugger, and one handler per operation.

Instruction sets are stateless.  Every handler is given the machine state and
the decoded instruction, and mutates that state directly.  A dialect only has
to override the handlers (or the small '_post' hooks) it changes, and the
dispatch table picks up the overrides automatically.

Most instructions are identified by their first nibble alone.  The 0x0, 0x5,
0x8, 0xE and 0xF families also need their low nibble(s) to select the
operation, so they are looked up with a wider bitmask.  Opcodes that match
nothing in the table are ignored.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from random import randint
from ..constants import ADDRESS_MASK, GLYPH_SIZE, GLYPH_TABLE_START, INDEX_MASK

# Bitmask applied to an opcode before lookup, chosen by its first nibble.  Anything not listed uses 0xF000.
OPCODE_MASKS = {
    0x0: 0xFFFF,  # Exact match
    0x5: 0xF00F,
    0x8: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

# n = Nibble
# kk = Byte
# nnn = address
# x/y = register (0-15)
Instruction = namedtuple("Instruction", ["opcode", "nibbles", "x", "y", "n", "nnn", "kk"])


def decode(opcode):
    nibbles = ((opcode & 0xF000) >> 12, (opcode & 0xF00) >> 8, (opcode & 0xF0) >> 4, opcode & 0xF)
    return Instruction(
        opcode=opcode,
        nibbles=nibbles,
        x=nibbles[1],
        y=nibbles[2],
        n=nibbles[3],
        nnn=opcode & 0xFFF,
        kk=opcode & 0xFF
    )


def mask_opcode(opcode):
    return opcode & OPCODE_MASKS.get(opcode >> 12, 0xF000)


class InstructionSet:
    name = "chip8"

    def __init__(self):
        self.instructions = {
            # Instructions beginning with nibble 0x0, bitmask 0xFFFF (i.e., exact match)
            0x00E0: self._00E0,
            0x00EE: self._00EE,
            # Instructions identified by their first nibble, bitmask 0xF000
            0x1000: self._1nnn,
            0x2000: self._2nnn,
            0x3000: self._3xkk,
            0x4000: self._4xkk,
            0x6000: self._6xkk,
            0x7000: self._7xkk,
            0x9000: self._9xy0,  # Low nibble is not checked
            0xA000: self._Annn,
            0xB000: self._Bnnn,
            0xC000: self._Cxkk,
            0xD000: self._Dxyn,
            # Instructions beginning with nibble 0x5/0x8, bitmask 0xF00F
            0x5000: self._5xy0,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            # Instructions beginning with nibble 0xE/0xF, bitmask 0xF0FF
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        self.mnemonics = {
            0x00E0: "CLS",
            0x00EE: "RET",
            0x1000: "JP 0x{nnn:03x}",
            0x2000: "CALL 0x{nnn:03x}",
            0x3000: "SE V{x:01x}, 0x{kk:02x}",
            0x4000: "SNE V{x:01x}, 0x{kk:02x}",
            0x6000: "LD V{x:01x}, 0x{kk:02x}",
            0x7000: "ADD V{x:01x}, 0x{kk:02x}",
            0x9000: "SNE V{x:01x}, V{y:01x}",
            0xA000: "LD I, 0x{nnn:03x}",
            0xB000: "JP V0, 0x{nnn:03x}",
            0xC000: "RND V{x:01x}, 0x{kk:02x}",
            0xD000: "DRW V{x:01x}, V{y:01x}, 0x{n:01x}",
            0x5000: "SE V{x:01x}, V{y:01x}",
            0x8000: "LD V{x:01x}, V{y:01x}",
            0x8001: "OR V{x:01x}, V{y:01x}",
            0x8002: "AND V{x:01x}, V{y:01x}",
            0x8003: "XOR V{x:01x}, V{y:01x}",
            0x8004: "ADD V{x:01x}, V{y:01x}",
            0x8005: "SUB V{x:01x}, V{y:01x}",
            0x8006: "SHR V{x:01x}",
            0x8007: "SUBN V{x:01x}, V{y:01x}",
            0x800E: "SHL V{x:01x}",
            0xE09E: "SKP V{x:01x}",
            0xE0A1: "SKNP V{x:01x}",
            0xF007: "LD V{x:01x}, DT",
            0xF00A: "LD V{x:01x}, K",
            0xF015: "LD DT, V{x:01x}",
            0xF018: "LD ST, V{x:01x}",
            0xF01E: "ADD I, V{x:01x}",
            0xF029: "LD F, V{x:01x}",
            0xF033: "LD B, V{x:01x}",
            0xF055: "LD [I], V{x:01x}",
            0xF065: "LD V{x:01x}, [I]"
        }

    def execute(self, state, opcode):
        # Returns False if the opcode was not recognised (and so did nothing)
        instruction = self.instructions.get(mask_opcode(opcode))

        if instruction is None:
            return False

        instruction(state, decode(opcode))
        return True

    def disassemble(self, opcode):
        mnemonic = self.mnemonics.get(mask_opcode(opcode))

        if mnemonic is None:
            return "???"

        return mnemonic.format(**decode(opcode)._asdict())

    def _00E0(self, state, ins):  # CLS
        state.framebuffer.clear()

    def _00EE(self, state, ins):  # RET
        state.pc = state.stack.pop()

    def _1nnn(self, state, ins):  # JP addr
        state.pc = ins.nnn

    def _2nnn(self, state, ins):  # CALL addr
        # The program counter has already moved past this instruction, so that is where RET comes back to
        state.stack.push(state.pc)
        state.pc = ins.nnn

    def _3xkk(self, state, ins):  # SE Vx, byte
        if state.v[ins.x] == ins.kk:
            state.inc_pc()

    def _4xkk(self, state, ins):  # SNE Vx, byte
        if state.v[ins.x] != ins.kk:
            state.inc_pc()

    def _5xy0(self, state, ins):  # SE Vx, Vy
        if state.v[ins.x] == state.v[ins.y]:
            state.inc_pc()

    def _6xkk(self, state, ins):  # LD Vx, byte
        state.v[ins.x] = ins.kk

    def _7xkk(self, state, ins):  # ADD Vx, byte
        # No carry flag for this one
        state.v[ins.x] = (state.v[ins.x] + ins.kk) & 0xFF

    def _post_8xy1_8xy2_8xy3(self, state):
        pass

    def _8xy0(self, state, ins):  # LD Vx, Vy
        state.v[ins.x] = state.v[ins.y]

    def _8xy1(self, state, ins):  # OR Vx, Vy
        state.v[ins.x] |= state.v[ins.y]
        self._post_8xy1_8xy2_8xy3(state)

    def _8xy2(self, state, ins):  # AND Vx, Vy
        state.v[ins.x] &= state.v[ins.y]
        self._post_8xy1_8xy2_8xy3(state)

    def _8xy3(self, state, ins):  # XOR Vx, Vy
        state.v[ins.x] ^= state.v[ins.y]
        self._post_8xy1_8xy2_8xy3(state)

    def _8xy4(self, state, ins):  # ADD Vx, Vy
        val = state.v[ins.x] + state.v[ins.y]
        state.v[ins.x] = val & 0xFF
        state.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, state, ins, minuend, subtrahend):  # Post-SUB/SUBN
        state.v[ins.x] = (minuend - subtrahend) & 0xFF
        # Vf is set when NOT borrowing, and this should happen AFTER Vx is set, as sometimes Vf is specified in the
        # parameters
        state.v[0xF] = int(minuend >= subtrahend)

    def _8xy5(self, state, ins):  # SUB Vx, Vy
        self._post_8xy5_8xy7(state, ins, state.v[ins.x], state.v[ins.y])

    def _8xy6(self, state, ins):  # SHR Vx
        # Vy is not consulted.  The flag is written first, so SHR Vf shifts the flag itself.
        state.v[0xF] = state.v[ins.x] & 1
        state.v[ins.x] >>= 1

    def _8xy7(self, state, ins):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(state, ins, state.v[ins.y], state.v[ins.x])

    def _8xyE(self, state, ins):  # SHL Vx
        state.v[0xF] = state.v[ins.x] >> 7  # Normalised to 0 or 1, like every other flag
        state.v[ins.x] = (state.v[ins.x] << 1) & 0xFF

    def _9xy0(self, state, ins):  # SNE Vx, Vy
        if state.v[ins.x] != state.v[ins.y]:
            state.inc_pc()

    def _Annn(self, state, ins):  # LD I, addr
        state.i = ins.nnn

    def _Bnnn(self, state, ins):  # JP V0, addr
        state.pc = (ins.nnn + state.v[0]) & ADDRESS_MASK

    def _Cxkk(self, state, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        state.v[ins.x] = randint(0, 0xFF) & ins.kk

    def _Dxyn(self, state, ins):  # DRW Vx, Vy, nibble
        v = state.v
        ram = state.ram
        framebuffer = state.framebuffer
        i = state.i
        # Vf is cleared before the coordinates are read.  A sprite positioned by Vf starts at 0, and moves along by
        # one for every pixel plotted after the first collision.
        v[0xF] = 0

        for y in range(ins.n):
            spr_data = ram.read((i + y) & ADDRESS_MASK)

            for x in range(8):
                if spr_data & (0x80 >> x):
                    # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                    if framebuffer.xor_pixel(v[ins.x] + x, v[ins.y] + y):
                        v[0xF] = 1

        # Even a zero-height sprite counts as a screen update
        framebuffer.mark_dirty()

    def _Ex9E(self, state, ins):  # SKP Vx
        if state.keypad[state.v[ins.x] & 0xF]:
            state.inc_pc()

    def _ExA1(self, state, ins):  # SKNP Vx
        if not state.keypad[state.v[ins.x] & 0xF]:
            state.inc_pc()

    def _Fx07(self, state, ins):  # LD Vx, DT
        state.v[ins.x] = state.dt

    def _Fx0A(self, state, ins):  # LD Vx, K
        # This opcode waits for a keypress, but since the timers still need to count down and the driver still needs
        # to poll for input, we'll return control and simply decrement the incremented program counter.
        for key, pressed in enumerate(state.keypad):
            if pressed:
                state.v[ins.x] = key
                return

        # We need to come back here on the next cycle, because no key is pressed
        state.dec_pc()

    def _Fx15(self, state, ins):  # LD DT, Vx
        state.dt = state.v[ins.x]

    def _Fx18(self, state, ins):  # LD ST, Vx
        state.st = state.v[ins.x]

    def _Fx1E(self, state, ins):  # ADD I, Vx
        state.i = (state.i + state.v[ins.x]) & INDEX_MASK

    def _Fx29(self, state, ins):  # LD F, Vx
        state.i = GLYPH_TABLE_START + GLYPH_SIZE * state.v[ins.x]

    def _Fx33(self, state, ins):  # LD B, Vx
        val = state.v[ins.x]
        i = state.i
        ram = state.ram
        ram.write(i & ADDRESS_MASK, val // 100)               # Most-significant digit
        ram.write((i + 1) & ADDRESS_MASK, (val // 10) % 10)   # Middle digit
        ram.write((i + 2) & ADDRESS_MASK, val % 10)           # Least-significant digit

    def _post_Fx55_Fx65(self, state, ins):
        pass

    def _Fx55(self, state, ins):  # LD [I], Vx
        i = state.i

        # Ensure with +1 that the final register is copied
        for reg in range(ins.x + 1):
            state.ram.write((i + reg) & ADDRESS_MASK, state.v[reg])

        self._post_Fx55_Fx65(state, ins)

    def _Fx65(self, state, ins):  # LD Vx, [I]
        i = state.i

        for reg in range(ins.x + 1):
            state.v[reg] = state.ram.read((i + reg) & ADDRESS_MASK)

        self._post_Fx55_Fx65(state, ins)
