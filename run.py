#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four console game

    python run.py                      # interactive game
    python run.py --seed 7 play        # reproducible computer opponent
    python run.py simulate --games 500 # computer vs computer tally
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
