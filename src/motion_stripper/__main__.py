"""
Entry point for module execution (``python -m motion_stripper``).

This module delegates execution to the CLI handler in ``motion_stripper.cli.__main__``.
"""

import sys
from motion_stripper.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
