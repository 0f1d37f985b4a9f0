"""Domain interfaces."""
from .directory import IDirectoryService
from .reporting import IReportingSink

__all__ = [
    'IDirectoryService',
    'IReportingSink',
]
