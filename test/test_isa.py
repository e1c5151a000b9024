#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chippy.isa import isa_amiga, isa_chip8, isa_cosmac
from chippy.state import MachineState


class TestDecode(unittest.TestCase):
    def test_decode_fields(self):
        ins = isa_chip8.decode(0xD12A)
        self.assertEqual(0xD12A, ins.opcode)
        self.assertEqual((0xD, 0x1, 0x2, 0xA), ins.nibbles)
        self.assertEqual((0x1, 0x2, 0xA), (ins.x, ins.y, ins.n))
        self.assertEqual(0x12A, ins.nnn)
        self.assertEqual(0x2A, ins.kk)

    def test_mask_opcode(self):
        self.assertEqual(0x00E0, isa_chip8.mask_opcode(0x00E0))
        self.assertEqual(0x0123, isa_chip8.mask_opcode(0x0123))
        self.assertEqual(0x1000, isa_chip8.mask_opcode(0x1234))
        self.assertEqual(0x9000, isa_chip8.mask_opcode(0x9231))
        self.assertEqual(0x5000, isa_chip8.mask_opcode(0x5230))
        self.assertEqual(0x8006, isa_chip8.mask_opcode(0x8126))
        self.assertEqual(0xE09E, isa_chip8.mask_opcode(0xE19E))
        self.assertEqual(0xF065, isa_chip8.mask_opcode(0xF265))


class TestDisassemble(unittest.TestCase):
    def setUp(self):
        self.isa = isa_chip8.InstructionSet()

    def test_disassemble_known(self):
        self.assertEqual("CLS", self.isa.disassemble(0x00E0))
        self.assertEqual("JP 0xabc", self.isa.disassemble(0x1ABC))
        self.assertEqual("LD V3, 0x0f", self.isa.disassemble(0x630F))
        self.assertEqual("DRW V1, V2, 0x3", self.isa.disassemble(0xD123))
        self.assertEqual("SHR V1", self.isa.disassemble(0x8126))
        self.assertEqual("LD Vf, [I]", self.isa.disassemble(0xFF65))

    def test_disassemble_unknown(self):
        for opcode in 0x0000, 0x0123, 0x5121, 0x800D, 0xE100, 0xF1FF:
            self.assertEqual("???", self.isa.disassemble(opcode))

    def test_every_handler_has_mnemonic(self):
        self.assertEqual(set(self.isa.instructions), set(self.isa.mnemonics))


class TestCosmac(unittest.TestCase):
    def setUp(self):
        self.state = MachineState()
        self.isa = isa_cosmac.InstructionSet()

    def _check_opcode(self, opcode):
        return self.isa.execute(self.state, opcode)

    def test_cosmac_name(self):
        self.assertEqual("cosmac", self.isa.name)
        self.assertEqual(set(isa_chip8.InstructionSet().instructions), set(self.isa.instructions))

    def test_cosmac_8xy6(self):  # SHR Vx, Vy
        self.state.v[0x1] = 0x00
        self.state.v[0x2] = 0x81
        self._check_opcode(0x8126)
        self.assertEqual(0x40, self.state.v[0x1])
        self.assertEqual(0x81, self.state.v[0x2])
        self.assertEqual(0x1, self.state.v[0xF])

    def test_cosmac_8xye(self):  # SHL Vx, Vy
        self.state.v[0x1] = 0x00
        self.state.v[0x2] = 0x81
        self._check_opcode(0x812E)
        self.assertEqual(0x02, self.state.v[0x1])
        self.assertEqual(0x1, self.state.v[0xF])
        self.assertEqual("SHL V1, V2", self.isa.disassemble(0x812E))

    def test_cosmac_shift_flag_register(self):  # SHR Vf, Vy / SHL Vf, Vy
        # Vy is copied into Vf, the flag is written, then Vf itself is shifted
        self.state.v[0x2] = 0x03
        self._check_opcode(0x8F26)
        self.assertEqual(0x0, self.state.v[0xF])
        self.state.v[0x2] = 0x81
        self._check_opcode(0x8F2E)
        self.assertEqual(0x2, self.state.v[0xF])
        self.assertEqual(0x81, self.state.v[0x2])

    def test_cosmac_shift_from_flag_register(self):  # SHR Vx, Vf
        self.state.v[0xF] = 0x05
        self._check_opcode(0x81F6)
        self.assertEqual(0x2, self.state.v[0x1])
        self.assertEqual(0x1, self.state.v[0xF])

    def test_cosmac_logic_resets_flag(self):
        base = isa_chip8.InstructionSet()

        for opcode in 0x8121, 0x8122, 0x8123:
            self.state.v[0xF] = 0x2
            base.execute(self.state, opcode)
            self.assertEqual(0x2, self.state.v[0xF])
            self._check_opcode(opcode)
            self.assertEqual(0x0, self.state.v[0xF])

        self.state.v[0xF] = 0x2
        self._check_opcode(0x8120)  # LD Vx, Vy is unaffected
        self.assertEqual(0x2, self.state.v[0xF])

    def test_cosmac_fx55(self):  # LD [I], Vx
        self.state.v[0x0] = 0x7
        self.state.i = 0x300
        self._check_opcode(0xF255)
        self.assertEqual(0x7, self.state.ram.read(0x300))
        self.assertEqual(0x303, self.state.i)

    def test_cosmac_fx65(self):  # LD Vx, [I]
        self.state.ram.write(0x300, 0x9)
        self.state.i = 0x300
        self._check_opcode(0xF065)
        self.assertEqual(0x9, self.state.v[0x0])
        self.assertEqual(0x301, self.state.i)

    def test_cosmac_shared_behaviour(self):
        # Anything not overridden behaves as standard
        self.state.v[0x1] = 0x05
        self.state.v[0x2] = 0x0A
        self._check_opcode(0x8125)
        self.assertEqual(0xFB, self.state.v[0x1])
        self.assertEqual(0x0, self.state.v[0xF])
        self.assertFalse(self._check_opcode(0x0000))


class TestAmiga(unittest.TestCase):
    def setUp(self):
        self.state = MachineState()
        self.isa = isa_amiga.InstructionSet()

    def test_amiga_fx1e_no_overflow(self):  # ADD I, Vx
        self.state.v[0x4] = 0x1
        self.state.v[0xF] = 0x5
        self.state.i = 0x10
        self.isa.execute(self.state, 0xF41E)
        self.assertEqual(0x11, self.state.i)
        self.assertEqual(0x0, self.state.v[0xF])

    def test_amiga_fx1e_overflow(self):  # ADD I, Vx
        self.state.v[0x4] = 0x3
        self.state.i = 0xFFD
        self.isa.execute(self.state, 0xF41E)
        self.assertEqual(0x1000, self.state.i)
        self.assertEqual(0x1, self.state.v[0xF])

        self.state.v[0x4] = 0xFD
        self.state.i = 0xFFFD
        self.isa.execute(self.state, 0xF41E)
        self.assertEqual(0xFA, self.state.i)
        self.assertEqual(0x1, self.state.v[0xF])

    def test_amiga_flag_register(self):  # ADD I, Vf
        # The flag replaces Vf after it has been added
        self.state.v[0xF] = 0x2
        self.state.i = 0x4
        self.isa.execute(self.state, 0xFF1E)
        self.assertEqual(0x6, self.state.i)
        self.assertEqual(0x0, self.state.v[0xF])
