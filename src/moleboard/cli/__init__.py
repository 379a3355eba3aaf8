"""CLI package for MoleBoard."""

from .main import main

__all__ = ["main"]
