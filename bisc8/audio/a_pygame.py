#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays the CHIP-8 buzzer through PyGame / SDL.

The buzzer only has an 'on' or 'off' status, so a single cycle of a square
wave is generated at startup, and looped for as long as the buzzer is on.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase
from ..constants import BEEP_FREQUENCY

PLAYBACK_FREQUENCY = 44100
DEFAULT_VOLUME = 0.1


class Audio(AudioBase):
    def __init__(self, frequency=BEEP_FREQUENCY):
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, allowedchanges=0)
        pygame.mixer.init()

        # Unsigned 8-bit samples: high for the first half of the wave, low for the second
        wave_length = max(2, int(PLAYBACK_FREQUENCY / frequency))
        half_wave = wave_length // 2
        self.sound = pygame.mixer.Sound(buffer=bytes([0xFF] * half_wave + [0x00] * (wave_length - half_wave)))
        self.sound.set_volume(DEFAULT_VOLUME)
        super().__init__()

    def enable_buzzer(self, enabled):
        # If the buzzer is already in the requested state, leave the sound alone so it isn't restarted
        if enabled != self.buzzer_enabled:
            if enabled:
                self.sound.play(-1)
            else:
                self.sound.stop()

        super().enable_buzzer(enabled)

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()
