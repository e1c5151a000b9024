#!/usr/bin/env python3

"""
Stack Emulator

The call stack is kept out of system RAM, because there is no specified
location for it and nothing running on the machine can address it directly.
It holds up to 16 return addresses, with a stack pointer counting the number
of active calls (0 when empty, 16 when full).

Calling beyond the final level, or returning with no active call, is a fault
in the running program.  Rather than wrapping around or reading stale entries,
both raise a StackError so the CPU can halt with a full debug dump.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size):
        self.items = [0] * size
        self.size = size
        self.pointer = 0

    def push(self, item):
        if self.pointer >= self.size:
            raise StackError("Stack overflow")

        self.items[self.pointer] = item
        self.pointer += 1

    def pop(self):
        if self.pointer <= 0:
            raise StackError("Stack underflow")

        self.pointer -= 1
        return self.items[self.pointer]

    def get_items(self):
        # For debugging.  Only the active entries are returned.
        return self.items[:self.pointer]
