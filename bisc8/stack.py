#!/usr/bin/env python3

"""
Stack Emulator

It is unnecessary to include the CPU call stack as part of system RAM, because
there is no specified location for it.  There is also no stack pointer (SP)
register exposed to the running program.  This means we can simply wrap a list
to fully (and quickly) emulate it.

The stack grows as needed unless a size limit is given.  Returning with nothing
on the stack only happens with a broken ROM, and there's no sensible way to
carry on, so it raises StackError.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size=None):
        self.items = []
        self.size = size

    def push(self, item):
        if self.size is not None and len(self.items) >= self.size:
            raise StackError("Stack overflow")

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackError("Stack underflow") from None

    def get_items(self):
        # For debugging
        return self.items

    def __len__(self):
        return len(self.items)
