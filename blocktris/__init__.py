"""A falling-block puzzle game on a 10x20 grid: piece shapes, board rules and a pygame window."""

__version__ = "0.1.0"
__all__ = ["blocks", "board", "game"]