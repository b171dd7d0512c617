#!/usr/bin/env python3

"""
Instruction Decoder

Every CHIP-8 instruction is a single big-endian 16-bit word.  The fields that
operations need (registers, immediate values and addresses) are always found
in the same nibble positions, so they can be extracted without knowing which
operation is being performed:

    x   - Bits 8-11, first register selector
    y   - Bits 4-7, second register selector
    n   - Bits 0-3, immediate nibble
    nn  - Bits 0-7, immediate byte
    nnn - Bits 0-11, immediate address

Decoding turns an instruction into one of a fixed set of operations.  The first
nibble selects a mask, which blanks out the operand fields, and the masked
opcode is then looked up in a table.  Anything not in the table is unknown.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from enum import Enum


class Instruction:
    __slots__ = ("_raw",)

    def __init__(self, raw):
        self._raw = raw & 0xFFFF

    @property
    def raw(self):
        return self._raw

    @property
    def nibbles(self):
        raw = self._raw
        return (raw & 0xF000) >> 12, (raw & 0xF00) >> 8, (raw & 0xF0) >> 4, raw & 0xF

    @property
    def x(self):
        return (self._raw & 0xF00) >> 8

    @property
    def y(self):
        return (self._raw & 0xF0) >> 4

    @property
    def n(self):
        return self._raw & 0xF

    @property
    def nn(self):
        return self._raw & 0xFF

    @property
    def nnn(self):
        return self._raw & 0xFFF

    def __eq__(self, other):
        if not isinstance(other, Instruction):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __str__(self):
        return "{:04X}".format(self._raw)

    def __repr__(self):
        return "Instruction(0x{:04X})".format(self._raw)


class Operation(Enum):
    NOP = "NOP"              # 0000
    CLS = "CLS"              # 00E0
    RET = "RET"              # 00EE
    JP = "JP addr"           # 1nnn
    CALL = "CALL addr"       # 2nnn
    SE_BYTE = "SE Vx, byte"  # 3xnn
    SNE_BYTE = "SNE Vx, byte"  # 4xnn
    SE_REG = "SE Vx, Vy"     # 5xy0
    LD_BYTE = "LD Vx, byte"  # 6xnn
    ADD_BYTE = "ADD Vx, byte"  # 7xnn
    LD_REG = "LD Vx, Vy"     # 8xy0
    OR = "OR Vx, Vy"         # 8xy1
    AND = "AND Vx, Vy"       # 8xy2
    XOR = "XOR Vx, Vy"       # 8xy3
    ADD_REG = "ADD Vx, Vy"   # 8xy4
    SUB = "SUB Vx, Vy"       # 8xy5
    SHR = "SHR Vx, Vy"       # 8xy6
    SUBN = "SUBN Vx, Vy"     # 8xy7
    SHL = "SHL Vx, Vy"       # 8xyE
    SNE_REG = "SNE Vx, Vy"   # 9xy0
    LD_I = "LD I, addr"      # Annn
    JP_V0 = "JP V0, addr"    # Bnnn
    RND = "RND Vx, byte"     # Cxnn
    DRW = "DRW Vx, Vy, n"    # Dxyn
    SKP = "SKP Vx"           # Ex9E
    SKNP = "SKNP Vx"         # ExA1
    LD_VX_DT = "LD Vx, DT"   # Fx07
    LD_VX_K = "LD Vx, K"     # Fx0A
    LD_DT_VX = "LD DT, Vx"   # Fx15
    LD_ST_VX = "LD ST, Vx"   # Fx18
    ADD_I = "ADD I, Vx"      # Fx1E
    LD_F = "LD F, Vx"        # Fx29
    LD_B = "LD B, Vx"        # Fx33
    LD_MEM_VX = "LD [I], Vx"  # Fx55
    LD_VX_MEM = "LD Vx, [I]"  # Fx65
    UNKNOWN = "???"


# Masks which blank out the operands, selected by the first nibble.  Unlisted nibbles only need the first nibble.
DECODE_MASKS = {
    0x0: 0xFFFF,  # Exact match
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

DECODE_TABLE = {
    0x0000: Operation.NOP,
    0x00E0: Operation.CLS,
    0x00EE: Operation.RET,
    0x1000: Operation.JP,
    0x2000: Operation.CALL,
    0x3000: Operation.SE_BYTE,
    0x4000: Operation.SNE_BYTE,
    0x5000: Operation.SE_REG,
    0x6000: Operation.LD_BYTE,
    0x7000: Operation.ADD_BYTE,
    0x8000: Operation.LD_REG,
    0x8001: Operation.OR,
    0x8002: Operation.AND,
    0x8003: Operation.XOR,
    0x8004: Operation.ADD_REG,
    0x8005: Operation.SUB,
    0x8006: Operation.SHR,
    0x8007: Operation.SUBN,
    0x800E: Operation.SHL,
    0x9000: Operation.SNE_REG,
    0xA000: Operation.LD_I,
    0xB000: Operation.JP_V0,
    0xC000: Operation.RND,
    0xD000: Operation.DRW,
    0xE09E: Operation.SKP,
    0xE0A1: Operation.SKNP,
    0xF007: Operation.LD_VX_DT,
    0xF00A: Operation.LD_VX_K,
    0xF015: Operation.LD_DT_VX,
    0xF018: Operation.LD_ST_VX,
    0xF01E: Operation.ADD_I,
    0xF029: Operation.LD_F,
    0xF033: Operation.LD_B,
    0xF055: Operation.LD_MEM_VX,
    0xF065: Operation.LD_VX_MEM
}


def decode(instruction):
    raw = instruction.raw
    mask = DECODE_MASKS.get(raw >> 12, 0xF000)
    return DECODE_TABLE.get(raw & mask, Operation.UNKNOWN)
