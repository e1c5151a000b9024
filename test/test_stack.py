#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chippy.stack import Stack, StackError


class TestStack(unittest.TestCase):
    def setUp(self):
        self.stack = Stack(3)

    def _populate_stack(self):
        self.stack.push(0x0)
        self.stack.push(0x1)
        self.stack.push(0xFFF)

    def test_stack_push_pop(self):
        self._populate_stack()
        self.assertEqual(3, self.stack.pointer)
        self.assertEqual(0xFFF, self.stack.pop())
        self.assertEqual(0x1, self.stack.pop())
        self.assertEqual(0x0, self.stack.pop())
        self.assertEqual(0, self.stack.pointer)

    def test_stack_overflow(self):
        self._populate_stack()
        self.assertRaises(StackError, self.stack.push, 0x1)
        self.assertEqual(3, self.stack.pointer)  # Nothing was lost or overwritten
        self.assertEqual(0xFFF, self.stack.pop())

    def test_stack_underflow(self):
        self.assertRaises(StackError, self.stack.pop)
        self.stack.push(0x2)
        self.stack.pop()
        self.assertRaises(StackError, self.stack.pop)

    def test_stack_get_items(self):
        self.assertEqual([], self.stack.get_items())
        self._populate_stack()
        self.stack.pop()
        self.assertEqual([0x0, 0x1], self.stack.get_items())
