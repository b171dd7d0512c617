#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries from the host.  The system font is built into the
emulator, so ROMs are the only thing that needs to be read from disk.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()
