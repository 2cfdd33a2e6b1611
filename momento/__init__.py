"""Momento - a mood journal with monthly recaps."""

__version__ = "0.1.0"
