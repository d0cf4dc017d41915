"""Procedural dungeon level generation for a turn-based roguelike."""

__version__ = "0.1.0"
