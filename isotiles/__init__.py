"""Isometric coin-collecting game with vector, matrix, geometry and tile-map helpers."""

__version__ = "0.1.0"