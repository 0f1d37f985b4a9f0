"""Presentation layer - process entry points."""
from .cli import CheckCommand

__all__ = [
    "CheckCommand",
]
