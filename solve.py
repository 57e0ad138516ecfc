#!/usr/bin/env python3
"""Standalone entry point — runs the crossed-wires solver on one input file."""

import sys
import os

# Add the project root to path so the crosswire package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from crosswire.cli import main

if __name__ == "__main__":
    main()
