#!/usr/bin/env python3

"""
Amiga Instruction Set

The CHIP-8 interpreter for the Amiga flags I overflowing the 4K address space
when adding to it.  At least one known game (Spacefight 2091!) depends on this.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .isa_chip8 import InstructionSet as InstructionSetBase
from ..constants import ADDRESS_MASK, INDEX_MASK


class InstructionSet(InstructionSetBase):
    name = "amiga"

    def _Fx1E(self, state, ins):  # ADD I, Vx
        val = state.i + state.v[ins.x]
        state.i = val & INDEX_MASK
        state.v[0xF] = int(val > ADDRESS_MASK)
