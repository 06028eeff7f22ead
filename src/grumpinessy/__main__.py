"""
Entry point for module execution (``python -m grumpinessy``).

This module delegates execution to the CLI handler in ``grumpinessy.cli.__main__``.
"""

import sys
from grumpinessy.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
