#!/usr/bin/env python3

"""
COSMAC VIP Instruction Set

Behaves like the first interpreter on the RCA COSMAC VIP, which a number of
early programs rely upon:
    * SHR/SHL copy Vy into Vx before shifting
    * OR/AND/XOR reset Vf
    * LD [I], Vx and LD Vx, [I] leave I pointing just past the last register
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .isa_chip8 import InstructionSet as InstructionSetBase
from ..constants import INDEX_MASK


class InstructionSet(InstructionSetBase):
    name = "cosmac"

    def __init__(self):
        super().__init__()

        # Both shifts take Vy as their source on this system
        self.mnemonics.update(
            {
                0x8006: "SHR V{x:01x}, V{y:01x}",
                0x800E: "SHL V{x:01x}, V{y:01x}"
            }
        )

    def _post_8xy1_8xy2_8xy3(self, state):
        state.v[0xF] = 0

    def _8xy6(self, state, ins):  # SHR Vx, Vy
        state.v[ins.x] = state.v[ins.y]
        super()._8xy6(state, ins)

    def _8xyE(self, state, ins):  # SHL Vx, Vy
        state.v[ins.x] = state.v[ins.y]
        super()._8xyE(state, ins)

    def _post_Fx55_Fx65(self, state, ins):
        state.i = (state.i + ins.x + 1) & INDEX_MASK
