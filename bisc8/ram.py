#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes.  The
CHIP-8 has a fixed 4K of RAM, with the system font at the bottom and programs
loaded at 0x200.

Addresses outside RAM are a programming error, so they raise RAMError rather
than silently wrapping.  The CPU decides for itself when an address wraps.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import RAM_SIZE


class RAMError(Exception):
    pass


class RAM:
    def __init__(self, mem_size=RAM_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def contains(self, location):
        return 0 <= location <= self.mem_top

    def read(self, location):
        self.check_overflow(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_overflow(location + size - 1)
        return bytes(self.mem[location:location + size])

    def write(self, location, byte):
        self.check_overflow(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_top = location + len(block)
        self.check_overflow(block_top - 1)
        self.mem[location:block_top] = block

    def check_overflow(self, location):
        if location > self.mem_top or location < 0:
            raise RAMError("Memory address 0x{:x} is out of range".format(location))

    def clear(self):
        self.mem[:] = bytes(self.mem_size)
