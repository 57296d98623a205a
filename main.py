#!/usr/bin/env python3
"""Launch the sciview terminal file viewer."""

import sys

from sciview.cli import main

if __name__ == "__main__":
    sys.exit(main())
