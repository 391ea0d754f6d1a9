"""
Main entry point for running the tester.

Usage:
    python -m battleships <ai.exe>
"""

import sys

from battleships.cli import main

if __name__ == "__main__":
    sys.exit(main())
