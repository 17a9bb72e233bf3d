"""Tic-tac-toe for one keyboard or two machines."""

__version__ = "0.1.0"
