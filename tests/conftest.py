"""
Shared fixtures for the DNS resolution check test suite.
"""
import os

import pytest
from unittest.mock import AsyncMock

from core.logging.logger import StructuredLogger, get_logger
from domain.interfaces.reporting import IReportingSink


@pytest.fixture
def logger() -> StructuredLogger:
    return get_logger("tests.dns_check", service="dns-check-test")


@pytest.fixture
def sink():
    """Reporting sink whose calls can be counted."""
    return AsyncMock(spec=IReportingSink)


@pytest.fixture
def network_enabled():
    if os.getenv("DNS_CHECK_NETWORK_TESTS") != "1":
        pytest.skip("set DNS_CHECK_NETWORK_TESTS=1 to run live DNS queries")
