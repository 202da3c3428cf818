"""
Grid Games - Main Entry Point
Minesweeper, Sudoku and Tic-Tac-Toe in the terminal
"""

import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from gridgames.cli import main


if __name__ == "__main__":
    sys.exit(main())
