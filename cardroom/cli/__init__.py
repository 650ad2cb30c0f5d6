"""Command-line surfaces for the hand counter and the War simulator."""

from .main import app, main

__all__ = ["app", "main"]
