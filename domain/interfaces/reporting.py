"""Reporting sink interface for the check verdict."""
from abc import ABC, abstractmethod
from typing import List


class IReportingSink(ABC):
    """Receives exactly one verdict per run."""

    @abstractmethod
    async def report_success(self) -> None:
        """Report a passing run."""
        pass

    @abstractmethod
    async def report_failure(self, messages: List[str]) -> None:
        """Report a failing run with human readable reasons."""
        pass
