#!/usr/bin/env python3

"""
Curses TTY Terminal Input Plugin

Uses a thread to trap Terminal inputs and redirects them to the emulator.  Note
that standard TTY Terminals only understand characters, they do not know when
an actual key is 'pressed' or 'released'.

Instead, a key is treated as held for a short time after its character is
seen, and keyboard repeats keep it held for as long as the real key is down.
Once a key hasn't been seen for a while, it is released.

We will also quit if ESC (char 27) or CTRL+C (char 3) is detected.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import queue
from threading import Thread
from time import perf_counter
from .i_null import Inputs as InputsBase

# Terminals don't have separate key press/release, so we have to pause after a character is seen.
KEYBOARD_FAKE_KEYDOWN_TIME = 0.2


# For thread safety, use proper queues to exchange information, avoiding shared variables.
def input_thread(thread_quitter_queue, input_queue, keymap_dict, curses_screen):
    while thread_quitter_queue.empty():
        # This blocks the thread from proceeding, so it won't get the quit message until at least one key is pressed.
        # As a daemon thread, it is terminated when the main thread shuts down.
        char = curses_screen.getch()

        if char < 0:
            continue

        char = ord(chr(char).lower())

        if char in (27, 3):  # Detect ESC or CTRL+C
            input_queue.put(None, block=True)
            break

        hex_key = keymap_dict.get(char)

        if hex_key is not None:
            try:
                input_queue.put(hex_key, block=False)
            except queue.Full:
                pass


class Inputs(InputsBase):
    def __init__(self, keymap, renderer):
        self.key_release_times = [0.0] * 0x10
        super().__init__(keymap, renderer, force_lowercase=True)

        self.thread_quitter_queue = queue.Queue(1)  # Used to inform the thread it should quit
        self.input_queue = queue.Queue(16)
        self.thread = Thread(
            target=input_thread,
            args=(
                self.thread_quitter_queue,
                self.input_queue,
                self.keymap_dict,
                renderer.get_curses_screen()
            ),
            daemon=True  # Terminate the thread when the main program quits (even if currently waiting for a keypress)
        )
        self.thread.start()

    def process_messages(self):
        this_time = perf_counter()

        while True:
            try:
                # Blocking here would lock up the main thread if nothing was pressed
                hex_key = self.input_queue.get(block=False)
            except queue.Empty:
                break

            if hex_key is None:
                return True

            if not self.keys.key_pressed(hex_key):
                self.keys.press_key(hex_key)

            self.key_release_times[hex_key] = this_time + KEYBOARD_FAKE_KEYDOWN_TIME

        # Release anything that hasn't been repeated recently
        for hex_key, release_time in enumerate(self.key_release_times):
            if release_time and release_time <= this_time:
                self.keys.release_key(hex_key)
                self.key_release_times[hex_key] = 0.0

        return False

    def shutdown(self):
        try:
            self.thread_quitter_queue.put(None, block=False)
        except queue.Full:
            # Something else has already requested the thread quits
            pass

        # Don't wait for the thread to quit, as it is likely to be waiting for a keypress
        super().shutdown()
