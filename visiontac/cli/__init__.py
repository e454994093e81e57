"""Command-line entry points."""

from .summary import main

__all__ = ["main"]
