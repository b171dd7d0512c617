#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from bisc8 import main
from bisc8.constants import DEFAULT_CLOCK_SPEED, DEFAULT_FG, DEFAULT_BG, LAYOUTS


def parse_args(argv=None):
    parser = ArgumentParser(description="A CHIP-8 emulator with PyGame, Curses and headless frontends.")
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-c", "--clock_speed", type=int,
        help="set the CPU speed in operations/second (default {}, 0 = uncapped)".format(DEFAULT_CLOCK_SPEED)
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "curses", "null"],
        help="set the rendering, input, and audio systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 512), and scale in Curses mode (default 2)"
    )
    parser.add_argument(
        "-m", "--mute", type=int, choices=[0, 1],
        help="mute the emulated audio.  0 = unmuted (default for PyGame), 1 = muted (default for Curses)"
    )
    parser.add_argument(
        "-l", "--layout", choices=list(LAYOUTS.keys()),
        help="choose the keyboard layout used to map keys onto the keypad (default qwerty)"
    )
    parser.add_argument(
        "-k", "--keymap",
        help=" ".join((
            "redefine the 16 keyscan codes (PyGame) or character numbers (Curses) for keys 0-F, overriding the",
            "layout.  Separate each decimal with a comma"
        ))
    )
    parser.add_argument("--fg", help="set the PyGame foreground colour in #RRGGBB hex (default {})".format(DEFAULT_FG))
    parser.add_argument("--bg", help="set the PyGame background colour in #RRGGBB hex (default {})".format(DEFAULT_BG))
    parser.add_argument(
        "--skip_unknown", action="store_true", default=False,
        help="report unknown instructions and carry on, rather than halting emulation"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output.  Slows CPU execution"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


def run():
    args = vars(parse_args())
    # It is possible to start the emulator from a GUI by calling main with a dictionary
    main(args)


if __name__ == "__main__":
    run()
