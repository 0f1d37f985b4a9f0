"""Presentation CLI exports."""
from .check_command import CheckCommand

__all__ = [
    "CheckCommand",
]
