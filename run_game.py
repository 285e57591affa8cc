#!/usr/bin/env python3
"""
Startup script for the Hammurabi game.

To run:
    python run_game.py [options]

Example usage:
    python run_game.py --new-game
    python run_game.py --years 10 --language ru
    HAMMURABI_SEED=42 python run_game.py --debug

Run this from the project root directory.
"""

import sys
import os

# Add project root to Python path
project_root = os.path.dirname(os.path.abspath(__file__))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from runtime.main import main

if __name__ == "__main__":
    main()
