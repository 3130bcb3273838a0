#!/usr/bin/env python3
"""
editkit - text helpers for editor components

This is a convenience wrapper for running from the repo root.
The actual entry point is editkit.main:main (for pip install).
"""

import sys

from editkit.main import main

if __name__ == "__main__":
    sys.exit(main())
