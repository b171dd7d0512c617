#!/usr/bin/env python3

"""
Keypad State

The CHIP-8 keypad has 16 keys, 0-F.  Held keys are stored as a 16-bit mask.

The last key to go down is also stored, since the 'wait for keypress'
instruction needs to see presses rather than holds.  This has to be reset by
the driver once every instruction cycle, so a single press is only seen once.
Releasing a key doesn't reset it, so a quick tap isn't lost before the CPU gets
to look at it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class KeysError(Exception):
    pass


class Keys:
    def __init__(self):
        self.mask = 0
        self.last_keypress = None

    @staticmethod
    def _check_key(key):
        if not 0 <= key <= 0xF:
            raise KeysError("Key 0x{:x} is out of range -- keys must be 0-F".format(key))

    def press_key(self, key):
        self._check_key(key)
        self.mask |= 1 << key
        self.last_keypress = key

    def release_key(self, key):
        self._check_key(key)
        self.mask &= ~(1 << key)

    def key_pressed(self, key):
        return bool(self.mask & (1 << key))

    def last_pressed(self):
        return self.last_keypress

    def reset_last_pressed(self):
        self.last_keypress = None

    def copy(self):
        keys = Keys()
        keys.mask = self.mask
        keys.last_keypress = self.last_keypress
        return keys

    def __eq__(self, other):
        if not isinstance(other, Keys):
            return NotImplemented

        return (self.mask, self.last_keypress) == (other.mask, other.last_keypress)

    def __repr__(self):
        return "Keys(mask=0x{:04x}, last_pressed={})".format(self.mask, self.last_keypress)
