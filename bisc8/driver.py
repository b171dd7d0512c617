#!/usr/bin/env python3

"""
Real-time Driver

Runs the emulator core in real time, and connects it to the host's renderer,
inputs and audio.

The CPU can be run at a fixed number of instructions per second, or uncapped.
The display is only refreshed (and host inputs only processed) at 60Hz, since
doing either on every instruction would slow everything down considerably.

Each cycle, the CPU gets a snapshot of the keypad.  The last key pressed is
reset straight after, so a single press is only seen by one cycle.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .chip8 import NoMoreInstructions, UnknownInstruction
from .constants import APP_NAME, APP_INTRO, DISPLAY_INTERVAL, SCREEN_WIDTH, SCREEN_HEIGHT


class DriverError(Exception):
    pass


class Driver:
    def __init__(self, chip8, renderer, inputs, audio, debugger, clock_speed=None, skip_unknown=False):
        self.chip8 = chip8
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()
        self.skip_unknown = skip_unknown
        self.core_interval = None if not clock_speed or clock_speed <= 0 else 1.0 / clock_speed
        self.screen_changed = False

        # Performance-related vars
        self.next_display_update_time = 0
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0

        self.renderer.set_resolution(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.report_perf()

    def run(self):
        while True:
            this_time = perf_counter()  # Do this first for maximum precision

            # Performance counters
            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                # Reporting the performance should be done before a refresh, as refreshing will likely show the report
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            # Prevent unnecessary display rendering in excess of host frame rate
            if this_time >= self.next_display_update_time:
                if self.inputs.process_messages():  # Process inputs at 60Hz too, to avoid slowdown
                    return
                self.next_display_update_time = this_time + DISPLAY_INTERVAL
                self.refresh_display()
                self.perf_counter_fps += 1

            if not self.cycle():
                self.refresh_display()
                print("Program finished.")
                return

            self.perf_counter_ops += 1

            if self.core_interval is not None:
                # Wait for next CPU instruction.  Do this last for maximum precision (takes into account time spent on
                # this instruction)
                next_time = this_time + self.core_interval

                while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                    pass

    def cycle(self):
        # Returns False once the program has run out of instructions
        keys = self.inputs.get_keys()

        try:
            screen, beep = self.chip8.instruction_cycle(keys.copy())
        except NoMoreInstructions:
            return False
        except UnknownInstruction as e:
            report = "{}\n{}".format(e, self.debugger.debug(self.chip8, verbose=True))

            if not self.skip_unknown:
                raise DriverError("Emulation halted.\n\n{}Debug info:\n{}".format(APP_INTRO, report)) from None

            # The program counter is already past the unknown instruction, so carry on from the next one
            print("Skipping unknown instruction. {}".format(report))
            beep = self.chip8.st > 0
        else:
            if self.live_debug:
                self.debugger.output(self.chip8)

            if screen is not None:
                self.draw_screen(screen)
        finally:
            keys.reset_last_pressed()

        self.audio.enable_buzzer(beep)
        return True

    def draw_screen(self, screen):
        renderer = self.renderer

        for y in range(SCREEN_HEIGHT):
            for x in range(SCREEN_WIDTH):
                renderer.set_pixel(x, y, screen.pixel(x, y))

        self.screen_changed = True

    def refresh_display(self):
        # Render pending screen updates.  Should be called whenever there will be a pause, a quit, or the display
        # refresh interval expires.
        self.renderer.refresh_display(self.screen_changed)
        self.screen_changed = False

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
