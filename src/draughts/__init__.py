"""Draughts: checkers rules core, game session and a PyQt6 board."""

__version__ = "0.1.0"
