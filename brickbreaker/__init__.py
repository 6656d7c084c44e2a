"""Brick breaker arcade game: display-free rules in world, the pygame window in game."""

__version__ = "1.0.0"
__all__ = ["game", "world"]