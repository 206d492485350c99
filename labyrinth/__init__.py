"""Labyrinth Solver - shortest paths through character-grid mazes."""

__version__ = "1.0.0"
