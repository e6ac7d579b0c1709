"""Loop and matrix exercises: number series, loop counting, text patterns, matrix operations and grid puzzles."""

__version__ = "0.1.0"