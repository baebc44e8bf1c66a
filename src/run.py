#!/usr/bin/env python3
"""
BetterScore

Quick launcher for running from a source checkout.
Equivalent to: python -m betterscore.main
"""

import sys
from pathlib import Path

# Add betterscore package to path
sys.path.insert(0, str(Path(__file__).parent))

from betterscore.main import main

if __name__ == "__main__":
    main()
