from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from core.logging.context import context as log_context
from core.logging.logger import StructuredLogger
from domain.entities.check import CheckOutcome, CheckSpec
from domain.errors import CheckTimedOut, DNSCheckError, ReportingFailed
from domain.interfaces.directory import IDirectoryService
from domain.interfaces.reporting import IReportingSink
from .blocking import run_blocking
from .endpoint_check import EndpointCheck
from .resolver import SYSTEM_RESOLVER, dns_lookup

Strategy = Callable[[], Awaitable[None]]


class Checker:
    """Runs one DNS check against a deadline and reports the verdict once."""

    def __init__(
        self,
        spec: CheckSpec,
        sink: IReportingSink,
        logger: StructuredLogger,
        *,
        directory: Optional[IDirectoryService] = None,
        strategy: Optional[Strategy] = None,
    ) -> None:
        self.spec = spec
        self.sink = sink
        self.logger = logger
        self.directory = directory
        self._strategy = strategy

    def strategy(self) -> Strategy:
        """Endpoint check when a label selector is set, else a default-resolver lookup."""
        if self._strategy is not None:
            return self._strategy
        if self.spec.uses_endpoints:
            if self.directory is None:
                raise ValueError("an endpoint check needs a directory service")
            endpoint_check = EndpointCheck(
                self.directory,
                self.logger,
                namespace=self.spec.namespace,
                label_selector=self.spec.label_selector,
            )
            return lambda: endpoint_check.run(self.spec.hostname)
        return self._check_default_resolver

    async def _check_default_resolver(self) -> None:
        hostname = self.spec.hostname
        try:
            await run_blocking(dns_lookup, SYSTEM_RESOLVER, hostname)
        except DNSCheckError as e:
            self.logger.error(lambda: str(e))
            raise
        self.logger.info(lambda: f"DNS Status check from service endpoint determined that {hostname} was OK.")

    async def do_checks(self) -> CheckOutcome:
        """Run the selected strategy and fold any error into a Failure outcome."""
        self.logger.info(lambda: f"DNS Status check testing hostname: {self.spec.hostname}")
        try:
            await self.strategy()()
        except DNSCheckError as e:
            return CheckOutcome.failure(str(e))
        except Exception as e:
            self.logger.error(lambda: "dns-check-exception", extra={"error": repr(e)}, exc_info=True)
            return CheckOutcome.failure(f"DNS Status check failed unexpectedly: {e}")
        return CheckOutcome.success()

    async def evaluate(self) -> CheckOutcome:
        """Race the check against ``spec.timeout``; the first to finish decides."""
        task = asyncio.create_task(self.do_checks(), name=f"dns-check:{self.spec.hostname}")
        done, _ = await asyncio.wait({task}, timeout=self.spec.timeout)
        if task in done:
            return task.result()
        # a lookup already blocked on its daemon thread runs out on its own; the result is dropped
        task.cancel()
        return CheckOutcome.timed_out(str(CheckTimedOut()))

    async def report(self, outcome: CheckOutcome) -> None:
        try:
            if outcome.ok:
                await self.sink.report_success()
                self.logger.info(lambda: "Successfully reported success to Kuberhealthy servers")
            else:
                await self.sink.report_failure(outcome.messages())
                self.logger.info(lambda: "Successfully reported failure to Kuberhealthy servers")
        except ReportingFailed as e:
            self.logger.error(lambda: f"Error reporting {outcome.kind.value} to Kuberhealthy servers: {e}")
            raise
        except Exception as e:
            self.logger.error(lambda: f"Error reporting {outcome.kind.value} to Kuberhealthy servers: {e}")
            raise ReportingFailed(str(e)) from e

    async def run(self) -> CheckOutcome:
        """Evaluate, report, and return the outcome.

        Raises ReportingFailed when the verdict could not be delivered; the
        outcome itself is already decided at that point and is not retried.
        """
        with log_context(hostname=self.spec.hostname, selector=self.spec.label_selector or None):
            outcome = await self.evaluate()
            if outcome.ok:
                self.logger.success(lambda: "dns-check-ok")
            else:
                self.logger.warning(lambda: "dns-check-failed", extra={"outcome": outcome.kind.value, "reason": outcome.reason})
            await self.report(outcome)
            return outcome
