"""Blind depths: a cave game in which you find your way through the dark by sonar echoes."""

__version__ = "0.1.0"