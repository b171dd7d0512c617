#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "BISCUIT-8 Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory map
RAM_SIZE = 0x1000
ROM_LOC = 0x200
FONT_LOC = 0x000
ROM_MAX_SIZE = RAM_SIZE - ROM_LOC

# Sprites for every hexadecimal digit, 5 bytes each
FONT_SPRITES = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))
FONT_SPRITE_SIZE = 5

# Display
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

# Timing
TIMER_FREQ = 60.0    # 60Hz delay and sound timer decrement
TIMER_INTERVAL = 1.0 / TIMER_FREQ
DISPLAY_FREQ = 60.0  # 60Hz host display refresh and input polling
DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ
DEFAULT_CLOCK_SPEED = 1000

# Keyboard layouts.  Each lists the keyscans for keys 0-F in order.  PyGame keyscans and ASCII characters are the
# same code for all of these keys
LAYOUTS = {
    # x 1 2 3 q w e a s d z c 4 r f v
    "qwerty":  "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118",
    # x 1 2 3 q w f a r s z c 4 p t v
    "colemak": "120,49,50,51,113,119,102,97,114,115,122,99,52,112,116,118"
}
DEFAULT_LAYOUT = "qwerty"

# Frontend defaults
DEFAULT_FG = "#FFFFFF"
DEFAULT_BG = "#000000"
BEEP_FREQUENCY = 700.0
