"""Kuberhealthy reporting client."""
import logging
from typing import List, Optional

import httpx

from config.settings import settings
from domain.errors import ReportingFailed
from domain.interfaces.reporting import IReportingSink

logger = logging.getLogger(__name__)

RUN_UUID_HEADER = "kh-run-uuid"


class KuberhealthyClient(IReportingSink):
    """Posts the check verdict to the Kuberhealthy reporting URL.

    Each report is sent once. Transport errors and non-200 answers raise
    ReportingFailed.
    """

    def __init__(
        self,
        reporting_url: Optional[str] = None,
        run_uuid: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.reporting_url = reporting_url if reporting_url is not None else settings.KH_REPORTING_URL
        self.run_uuid      = run_uuid if run_uuid is not None else settings.KH_RUN_UUID
        self.timeout       = timeout or settings.REPORT_TIMEOUT
        self.transport     = transport

    async def report_success(self) -> None:
        await self._send(ok=True, errors=[])

    async def report_failure(self, messages: List[str]) -> None:
        await self._send(ok=False, errors=list(messages))

    async def _send(self, *, ok: bool, errors: List[str]) -> None:
        if not self.reporting_url:
            raise ReportingFailed("KH_REPORTING_URL environment variable has not been set")

        headers = {RUN_UUID_HEADER: self.run_uuid} if self.run_uuid else {}
        payload = {"OK": ok, "Errors": errors}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.reporting_url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise ReportingFailed(f"failed to send report to {self.reporting_url}: {exc}") from exc

        if response.status_code != 200:
            raise ReportingFailed(
                f"bad status code from kuberhealthy status reporting url: "
                f"[{response.status_code}] {response.text[:200]}"
            )
        logger.debug("report accepted: ok=%s errors=%d", ok, len(errors))

    async def ping(self) -> bool:
        """True when anything answers on the reporting URL."""
        if not self.reporting_url:
            return False
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                await client.get(self.reporting_url)
        except httpx.HTTPError as exc:
            logger.debug("kuberhealthy not reachable yet: %s", exc)
            return False
        return True
