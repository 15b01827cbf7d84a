"""
Pytest configuration for the Tower of Hanoi bot.

Pins tensor encodings to the CPU so tests are deterministic and do not
depend on available accelerators.
"""

import os

os.environ.setdefault("HANOI_DEVICE", "cpu")
