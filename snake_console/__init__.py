"""
Console Snake - a single-player terminal snake game with a persisted highscore.
"""

__version__ = "1.0.0"
