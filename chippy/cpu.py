#!/usr/bin/env python3

"""
CPU Emulator

Like a real computer, this is where most of the processing happens.  Each
call to cycle() runs exactly one instruction:

    1. The driver's current keypad state is latched (if supplied)
    2. Two bytes are fetched at the program counter (big-endian)
    3. The program counter moves on by 2, before anything is executed
    4. The opcode is handed to the instruction set, which updates the state
    5. The delay and sound timers each count down by one, stopping at zero

The CPU has no idea how fast it is being run.  Cadence is entirely up to the
driver calling cycle(), so a 60Hz timer rate relies on the driver clocking at
60 cycles per second (or the program accepting faster timers).

Which instructions exist, and exactly how they behave, is decided by the
instruction set passed in.  The CPU only provides the fetch/decode/timer
skeleton around it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import ADDRESS_MASK, APP_INTRO
from .ram import RAMError
from .stack import StackError

CPU_ENDIAN = "big"  # CHIP-8 is big-endian


class CPUError(Exception):
    pass


class CPU:
    def __init__(self, state, instruction_set, debugger):
        self.state = state
        self.instruction_set = instruction_set
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()
        self.opcode = 0
        self.debug_pc = state.pc

    def cycle(self, keypad=None):
        state = self.state

        if keypad is not None:
            state.set_keypad(keypad)

        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = state.pc
        self.opcode = self.fetch()
        state.inc_pc()  # Program counter updates after fetch (and technically before decode), but before execute

        if self.live_debug:
            self.debug(self.instruction_set.disassemble(self.opcode))

        try:
            self.instruction_set.execute(state, self.opcode)
        except (StackError, RAMError) as err:
            raise CPUError(
                (
                    "Emulation halted.\n\n" +
                    "{}Debug info ({}):\n" +
                    "{}\n\n{} caused by opcode 0x{:04x} at address 0x{:03x}."
                ).format(
                    APP_INTRO, self.instruction_set.name,
                    self.debugger.debug(self, self.instruction_set.disassemble(self.opcode), verbose=True),
                    err, self.opcode, self.debug_pc
                )
            ) from err

        self.tick_timers()

    def fetch(self):
        ram = self.state.ram
        pc = self.state.pc
        return int.from_bytes(bytes((ram.read(pc), ram.read((pc + 1) & ADDRESS_MASK))), CPU_ENDIAN, signed=False)

    def tick_timers(self):
        state = self.state

        if state.dt > 0:
            state.dt -= 1

        if state.st > 0:
            state.st -= 1

    def display_dirty(self):
        return self.state.take_display_dirty()

    def get_display(self):
        return self.state.get_display()

    def debug(self, instruction):
        self.debugger.output(self, instruction)
