"""Micromouse maze-solving agents for a line-based maze simulator."""

__version__ = "0.2.0"
__all__ = ["api", "maze", "solver", "tester"]