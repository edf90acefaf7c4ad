"""
Entry point for module execution (``python -m cssexp``).

This module delegates execution to the CLI handler in ``cssexp.cli.__main__``.
"""

import sys
from cssexp.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
