#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from bisc8.instruction import Instruction, Operation, DECODE_TABLE, decode


class TestInstruction(unittest.TestCase):
    def test_instruction_fields(self):
        instruction = Instruction(0xD12F)
        self.assertEqual((0xD, 0x1, 0x2, 0xF), instruction.nibbles)
        self.assertEqual(0x1, instruction.x)
        self.assertEqual(0x2, instruction.y)
        self.assertEqual(0xF, instruction.n)
        self.assertEqual(0x2F, instruction.nn)
        self.assertEqual(0x12F, instruction.nnn)

    def test_instruction_fields_match_masking(self):
        # Every 7th value reaches all nibble positions without being slow
        for raw in range(0, 0x10000, 7):
            instruction = Instruction(raw)
            self.assertEqual(raw, instruction.raw)
            self.assertEqual((raw & 0x0F00) >> 8, instruction.x)
            self.assertEqual((raw & 0x00F0) >> 4, instruction.y)
            self.assertEqual(raw & 0x000F, instruction.n)
            self.assertEqual(raw & 0x00FF, instruction.nn)
            self.assertEqual(raw & 0x0FFF, instruction.nnn)
            self.assertEqual(raw >> 12, instruction.nibbles[0])

    def test_instruction_limits(self):
        self.assertEqual((0, 0, 0, 0), Instruction(0x0000).nibbles)
        self.assertEqual((0xF, 0xF, 0xF, 0xF), Instruction(0xFFFF).nibbles)
        self.assertEqual(0x0000, Instruction(0x10000).raw)

    def test_instruction_formatting(self):
        self.assertEqual("00E0", str(Instruction(0x00E0)))
        self.assertEqual("ABCD", str(Instruction(0xabcd)))
        self.assertEqual("Instruction(0x00EE)", repr(Instruction(0x00EE)))

    def test_instruction_equality(self):
        self.assertEqual(Instruction(0x1234), Instruction(0x1234))
        self.assertNotEqual(Instruction(0x1234), Instruction(0x1235))
        self.assertEqual(1, len({Instruction(0x1234), Instruction(0x1234)}))


class TestDecode(unittest.TestCase):
    def _check_decode(self, opcode, operation):
        self.assertIs(operation, decode(Instruction(opcode)))

    def test_decode_operation_count(self):
        self.assertEqual(35, len(DECODE_TABLE))
        self.assertEqual(36, len(Operation))

    def test_decode_known(self):
        for opcode, operation in (
            (0x0000, Operation.NOP),
            (0x00E0, Operation.CLS),
            (0x00EE, Operation.RET),
            (0x1ABC, Operation.JP),
            (0x2ABC, Operation.CALL),
            (0x3A12, Operation.SE_BYTE),
            (0x4A12, Operation.SNE_BYTE),
            (0x5AB0, Operation.SE_REG),
            (0x6A12, Operation.LD_BYTE),
            (0x7A12, Operation.ADD_BYTE),
            (0x8AB0, Operation.LD_REG),
            (0x8AB1, Operation.OR),
            (0x8AB2, Operation.AND),
            (0x8AB3, Operation.XOR),
            (0x8AB4, Operation.ADD_REG),
            (0x8AB5, Operation.SUB),
            (0x8AB6, Operation.SHR),
            (0x8AB7, Operation.SUBN),
            (0x8ABE, Operation.SHL),
            (0x9AB0, Operation.SNE_REG),
            (0xAABC, Operation.LD_I),
            (0xBABC, Operation.JP_V0),
            (0xCA12, Operation.RND),
            (0xDABF, Operation.DRW),
            (0xEA9E, Operation.SKP),
            (0xEAA1, Operation.SKNP),
            (0xFA07, Operation.LD_VX_DT),
            (0xFA0A, Operation.LD_VX_K),
            (0xFA15, Operation.LD_DT_VX),
            (0xFA18, Operation.LD_ST_VX),
            (0xFA1E, Operation.ADD_I),
            (0xFA29, Operation.LD_F),
            (0xFA33, Operation.LD_B),
            (0xFA55, Operation.LD_MEM_VX),
            (0xFA65, Operation.LD_VX_MEM)
        ):
            self._check_decode(opcode, operation)

    def test_decode_unknown(self):
        for opcode in 0x0001, 0x00E1, 0x0123, 0x5001, 0x8008, 0x800F, 0x9001, 0xE09F, 0xE0A2, 0xF100, 0xF075, 0xFFFF:
            self._check_decode(opcode, Operation.UNKNOWN)
