import asyncio
import threading
import time

import pytest

from application.services.dns_check.blocking import run_blocking
from application.services.dns_check.checker import Checker
from domain.entities.check import CheckSpec, OutcomeKind


@pytest.mark.asyncio
async def test_returns_result():
    assert await run_blocking(sum, [1, 2, 3]) == 6


@pytest.mark.asyncio
async def test_propagates_exception():
    def fail():
        raise OSError("no such host")

    with pytest.raises(OSError, match="no such host"):
        await run_blocking(fail)


@pytest.mark.asyncio
async def test_runs_on_daemon_thread():
    thread = await run_blocking(threading.current_thread)
    assert thread is not threading.main_thread()
    assert thread.daemon


def test_timed_out_lookup_does_not_delay_exit(sink, logger):
    release = threading.Event()

    async def strategy():
        await run_blocking(release.wait, 5)

    checker = Checker(CheckSpec(hostname="kubernetes.default", timeout=0.1), sink, logger, strategy=strategy)
    started = time.monotonic()
    try:
        outcome = asyncio.run(checker.run())
        elapsed = time.monotonic() - started
    finally:
        release.set()

    assert outcome.kind is OutcomeKind.TIMED_OUT
    assert sink.report_failure.await_count == 1
    assert elapsed < 2.0
