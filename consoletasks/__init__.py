"""Interactive console programs: number guessing, a calculator, tic-tac-toe, a to-do list and a library manager."""

__version__ = "0.1.0"