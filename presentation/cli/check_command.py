from __future__ import annotations

from typing import Optional

from application.services.dns_check import Checker, NodeReadinessGate
from config.settings import parse_config, settings
from core.logging.logger import StructuredLogger, get_logger
from domain.entities.check import CheckOutcome
from domain.errors import ConfigurationInvalid, ReportingFailed
from infrastructure.api import KuberhealthyClient, KubernetesClient


class CheckCommand:
    """One DNS resolution check run: configure, gate, check, report."""

    def __init__(
        self,
        *,
        kube: Optional[KubernetesClient] = None,
        reporter: Optional[KuberhealthyClient] = None,
        gate_enabled: bool = True,
    ) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="dns-check")
        self.kube = kube
        self.reporter = reporter
        self.gate_enabled = gate_enabled

    async def run(self) -> int:
        try:
            spec = parse_config()
        except ConfigurationInvalid as e:
            self.logger.error(lambda: f"Configuration error: {e}")
            return 1

        kube = self.kube or KubernetesClient()
        reporter = self.reporter or KuberhealthyClient()
        outcome: Optional[CheckOutcome] = None
        async with kube:
            if self.gate_enabled:
                await self._wait_until_ready(kube, reporter, spec.node_name)
            checker = Checker(spec, reporter, self.logger, directory=kube)
            try:
                outcome = await checker.run()
            except ReportingFailed:
                outcome = None
        if outcome is None:
            self.logger.error(lambda: f"Error running DNS Status check for hostname: {spec.hostname}")
        self.logger.info(lambda: f"Done running DNS Status check for hostname: {spec.hostname}")
        return 0 if outcome is not None else 1

    async def _wait_until_ready(self, kube: KubernetesClient, reporter: KuberhealthyClient, node_name: str) -> None:
        gate = NodeReadinessGate(
            kube,
            self.logger,
            limit_s=settings.READINESS_LIMIT,
            interval_s=settings.READINESS_INTERVAL,
        )
        await gate.wait_for_node_age(node_name, settings.MIN_NODE_AGE)
        await gate.wait_for_kuberhealthy(reporter.ping)
