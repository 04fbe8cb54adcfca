# SPDX-License-Identifier: MIT
"""Package entry point — run via `python -m lintbridge`."""

import sys

from lintbridge.cli import main

if __name__ == "__main__":
    sys.exit(main())
