#!/usr/bin/env python3

"""
CHIP-8 Emulator Core

Owns the RAM, registers, call stack, timers and screen, and runs a single
fetch-decode-execute step whenever instruction_cycle() is called.  Nothing in
here talks to the host: the driver supplies the state of the keypad before each
cycle, and gets back a copy of the screen (only if it changed) and whether the
buzzer should be sounding.

The delay and sound timers count down at 60Hz of real time, rather than a fixed
number of instructions, so the driver is free to run the CPU at any speed.

Instructions which wait for a keypress don't block.  They wind the program
counter back and run again on the next cycle until a key is pressed, so the
driver keeps full control of timing.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from random import randint
from .constants import FONT_LOC, FONT_SPRITES, FONT_SPRITE_SIZE, ROM_LOC, ROM_MAX_SIZE, TIMER_INTERVAL
from .instruction import Instruction, Operation, decode
from .keys import Keys
from .ram import RAM
from .screen import Screen
from .stack import Stack

CPU_ENDIAN = "big"  # CHIP-8 is big-endian
I_BITMASK = 0xFFF   # Index register and anything addressed through it is 12-bit

# Operations after which the driver receives a fresh copy of the screen
REDRAW_OPERATIONS = frozenset((Operation.CLS, Operation.DRW))


class Chip8Error(Exception):
    pass


class RomTooBig(Chip8Error):
    def __init__(self, exceed):
        self.exceed = exceed
        super().__init__(
            "ROM size exceeds the amount of RAM provided by the emulator by {} bytes".format(exceed)
        )


class NoMoreInstructions(Chip8Error):
    def __init__(self):
        super().__init__("There aren't any more instructions to run")


class UnknownInstruction(Chip8Error):
    def __init__(self, instruction, pc):
        self.instruction = instruction
        self.pc = pc
        super().__init__("Instruction opcode 0x{} at 0x{:03x} is unknown".format(instruction, pc))


class Chip8:
    def __init__(self, rom):
        if len(rom) > ROM_MAX_SIZE:
            raise RomTooBig(len(rom) - ROM_MAX_SIZE)

        self.ram = RAM()
        self.ram.write_block(FONT_LOC, FONT_SPRITES)
        self.ram.write_block(ROM_LOC, rom)

        # Initialise registers
        self.v = bytearray(16)  # Bytearrays are mutable and already limited to 8-bit values
        self.i = 0              # Index register
        self.pc = ROM_LOC
        self.debug_pc = ROM_LOC  # Address of the instruction being executed
        self.stack = Stack()

        # Initialise timers
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer
        self.last_decrement = perf_counter()

        self.instruction = Instruction(0)
        self.operation = Operation.NOP
        self.keys = Keys()
        self.screen = Screen()

        self.operations = {
            Operation.NOP:       self._0000,
            Operation.CLS:       self._00E0,
            Operation.RET:       self._00EE,
            Operation.JP:        self._1nnn,
            Operation.CALL:      self._2nnn,
            Operation.SE_BYTE:   self._3xnn,
            Operation.SNE_BYTE:  self._4xnn,
            Operation.SE_REG:    self._5xy0,
            Operation.LD_BYTE:   self._6xnn,
            Operation.ADD_BYTE:  self._7xnn,
            Operation.LD_REG:    self._8xy0,
            Operation.OR:        self._8xy1,
            Operation.AND:       self._8xy2,
            Operation.XOR:       self._8xy3,
            Operation.ADD_REG:   self._8xy4,
            Operation.SUB:       self._8xy5,
            Operation.SHR:       self._8xy6,
            Operation.SUBN:      self._8xy7,
            Operation.SHL:       self._8xyE,
            Operation.SNE_REG:   self._9xy0,
            Operation.LD_I:      self._Annn,
            Operation.JP_V0:     self._Bnnn,
            Operation.RND:       self._Cxnn,
            Operation.DRW:       self._Dxyn,
            Operation.SKP:       self._Ex9E,
            Operation.SKNP:      self._ExA1,
            Operation.LD_VX_DT:  self._Fx07,
            Operation.LD_VX_K:   self._Fx0A,
            Operation.LD_DT_VX:  self._Fx15,
            Operation.LD_ST_VX:  self._Fx18,
            Operation.ADD_I:     self._Fx1E,
            Operation.LD_F:      self._Fx29,
            Operation.LD_B:      self._Fx33,
            Operation.LD_MEM_VX: self._Fx55,
            Operation.LD_VX_MEM: self._Fx65
        }

    def instruction_cycle(self, keys):
        self.decrement_timers()
        instruction = self.fetch()

        if instruction is None:
            raise NoMoreInstructions()

        self.keys = keys
        self.instruction = instruction
        self.debug_pc = self.pc
        self.pc += 2  # Program counter updates after fetch, but before execute
        redraw = self.decode_exec()

        return (self.screen.copy() if redraw else None), self.st > 0

    def decrement_timers(self):
        this_time = perf_counter()

        if this_time - self.last_decrement >= TIMER_INTERVAL:
            if self.dt > 0:
                self.dt -= 1

            if self.st > 0:
                self.st -= 1

            self.last_decrement = this_time

    def fetch(self):
        pc = self.pc

        if not (self.ram.contains(pc) and self.ram.contains(pc + 1)):
            return None

        return Instruction(int.from_bytes(self.ram.read_block(pc, 2), CPU_ENDIAN, signed=False))

    def decode_exec(self):
        # Returns whether the screen was updated
        operation = decode(self.instruction)
        self.operation = operation

        if operation is Operation.UNKNOWN:
            raise UnknownInstruction(self.instruction, self.pc)

        self.operations[operation]()
        return operation in REDRAW_OPERATIONS

    # Operands are always in the same opcode position throughout all instructions

    @property
    def vx(self):
        return self.instruction.x

    @property
    def vy(self):
        return self.instruction.y

    @property
    def addr(self):
        return self.instruction.nnn

    @property
    def byte(self):
        return self.instruction.nn

    @property
    def nibble(self):
        return self.instruction.n

    def _skip(self):
        self.pc += 2

    def _0000(self):  # NOP
        pass

    def _00E0(self):  # CLS
        self.screen.clear()

    def _00EE(self):  # RET
        self.pc = self.stack.pop()

    def _1nnn(self):  # JP addr
        self.pc = self.addr

    def _2nnn(self):  # CALL addr
        self.stack.push(self.pc)
        self.pc = self.addr

    def _3xnn(self):  # SE Vx, byte
        if self.v[self.vx] == self.byte:
            self._skip()

    def _4xnn(self):  # SNE Vx, byte
        if self.v[self.vx] != self.byte:
            self._skip()

    def _5xy0(self):  # SE Vx, Vy
        if self.v[self.vx] == self.v[self.vy]:
            self._skip()

    def _6xnn(self):  # LD Vx, byte
        self.v[self.vx] = self.byte

    def _7xnn(self):  # ADD Vx, byte
        vx = self.vx
        self.v[vx] = (self.v[vx] + self.byte) & 0xFF  # No carry flag

    def _8xy0(self):  # LD Vx, Vy
        self.v[self.vx] = self.v[self.vy]

    # Logical operations always reset Vf
    def _8xy1(self):  # OR Vx, Vy
        self.v[self.vx] |= self.v[self.vy]
        self.v[0xF] = 0

    def _8xy2(self):  # AND Vx, Vy
        self.v[self.vx] &= self.v[self.vy]
        self.v[0xF] = 0

    def _8xy3(self):  # XOR Vx, Vy
        self.v[self.vx] ^= self.v[self.vy]
        self.v[0xF] = 0

    def _8xy4(self):  # ADD Vx, Vy
        vx = self.vx
        val = self.v[vx] + self.v[self.vy]
        self.v[vx] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, val):  # Post-SUB/SUBN
        self.v[self.vx] = val & 0xFF
        # Vf is set when NOT borrowing, and this must happen AFTER Vx is set in case Vx is Vf
        self.v[0xF] = int(val >= 0)

    def _8xy5(self):  # SUB Vx, Vy
        self._post_8xy5_8xy7(self.v[self.vx] - self.v[self.vy])

    def _8xy6(self):  # SHR Vx, Vy
        # The flag comes from Vx, but the value shifted into Vx comes from Vy
        vx = self.vx
        lsb = self.v[vx] & 1
        self.v[vx] = self.v[self.vy] >> 1
        self.v[0xF] = lsb

    def _8xy7(self):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(self.v[self.vy] - self.v[self.vx])

    def _8xyE(self):  # SHL Vx, Vy
        vx = self.vx
        msb = (self.v[vx] >> 7) & 1
        self.v[vx] = (self.v[self.vy] << 1) & 0xFF
        self.v[0xF] = msb

    def _9xy0(self):  # SNE Vx, Vy
        if self.v[self.vx] != self.v[self.vy]:
            self._skip()

    def _Annn(self):  # LD I, addr
        self.i = self.addr

    def _Bnnn(self):  # JP V0, addr
        self.pc = self.addr + self.v[0x0]

    def _Cxnn(self):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[self.vx] = randint(0, 0xFF) & self.byte

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        i = self.i
        sprite = bytes(self.ram.read((i + row) & I_BITMASK) for row in range(self.nibble))
        self.v[0xF] = int(self.screen.draw_sprite(sprite, self.v[self.vx], self.v[self.vy]))

    def _Ex9E(self):  # SKP Vx
        if self.keys.key_pressed(self.v[self.vx]):
            self._skip()

    def _ExA1(self):  # SKNP Vx
        if not self.keys.key_pressed(self.v[self.vx]):
            self._skip()

    def _Fx07(self):  # LD Vx, DT
        self.v[self.vx] = self.dt

    def _Fx0A(self):  # LD Vx, K
        # Rather than blocking, come back to this instruction on the next cycle until a key has been pressed, so the
        # timers keep running and the driver keeps control
        key = self.keys.last_pressed()

        if key is None:
            self.pc -= 2
        else:
            self.v[self.vx] = key

    def _Fx15(self):  # LD DT, Vx
        self.dt = self.v[self.vx]

    def _Fx18(self):  # LD ST, Vx
        self.st = self.v[self.vx]

    def _Fx1E(self):  # ADD I, Vx
        self.i = (self.i + self.v[self.vx]) & I_BITMASK

    def _Fx29(self):  # LD F, Vx
        self.i = FONT_LOC + FONT_SPRITE_SIZE * self.v[self.vx]

    def _Fx33(self):  # LD B, Vx
        val = self.v[self.vx]
        i = self.i
        self.ram.write(i, val // 100)                          # Most-significant digit
        self.ram.write((i + 1) & I_BITMASK, (val // 10) % 10)  # Middle digit
        self.ram.write((i + 2) & I_BITMASK, val % 10)          # Least-significant digit

    def _Fx55(self):  # LD [I], Vx
        vx = self.vx
        i = self.i

        for reg in range(vx + 1):
            self.ram.write((i + reg) & I_BITMASK, self.v[reg])

        self.i = (i + vx + 1) & I_BITMASK

    def _Fx65(self):  # LD Vx, [I]
        vx = self.vx
        i = self.i

        for reg in range(vx + 1):
            self.v[reg] = self.ram.read((i + reg) & I_BITMASK)

        self.i = (i + vx + 1) & I_BITMASK
