#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries for later copying into the machine's memory.  Any
problem opening the file (missing, unreadable, a directory, etc.) is left to
propagate to the caller, as there is nothing sensible to run without it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_binary(self, filename):
        f = open(filename, "rb")

        try:
            data = f.read()
        finally:
            f.close()

        return data
