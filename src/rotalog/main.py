from __future__ import annotations

"""
Main Entry Point.

Routes 'python -m rotalog', the 'rotalog' console script and direct
execution of this file to the CLI controller.
"""

import os
import sys

# Path visibility when executed as a plain script from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from rotalog.interface.cli.app import main  # noqa: E402


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
