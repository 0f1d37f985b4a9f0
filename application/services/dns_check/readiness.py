from __future__ import annotations

import asyncio
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

from core.logging.logger import StructuredLogger
from domain.interfaces.directory import IDirectoryService

Ping = Callable[[], Awaitable[bool]]


def node_age_seconds(node: dict, now: Optional[datetime] = None) -> Optional[float]:
    """Age of a node object from its creationTimestamp, or None when absent."""
    created = (node.get("metadata") or {}).get("creationTimestamp")
    if not created:
        return None
    created_at = datetime.fromisoformat(created.replace("Z", "+00:00"))
    return ((now or datetime.now(timezone.utc)) - created_at).total_seconds()


class NodeReadinessGate:
    """Delays the check until the node is old enough and Kuberhealthy answers.

    Every wait is bounded by ``limit_s`` overall. Expiry and errors are logged
    and never stop the check from running.
    """

    def __init__(
        self,
        directory: IDirectoryService,
        logger: StructuredLogger,
        *,
        limit_s: float = 60.0,
        interval_s: float = 5.0,
    ) -> None:
        self.directory = directory
        self.logger = logger
        self.limit_s = limit_s
        self.interval_s = interval_s
        self._deadline: Optional[float] = None

    def _remaining(self) -> float:
        if self._deadline is None:
            self._deadline = time.monotonic() + self.limit_s
        return max(0.0, self._deadline - time.monotonic())

    async def wait_for_node_age(self, node_name: str, min_age_s: float) -> bool:
        while True:
            try:
                age = node_age_seconds(await self.directory.get_node(node_name))
            except Exception as e:
                self.logger.error(lambda: f"Error waiting for node to reach minimum age: {e}")
                return False
            if age is None or age >= min_age_s:
                self.logger.debug(lambda: "node-age-ok", extra={"node": node_name, "age_s": age})
                return True
            wait = min(min_age_s - age, self._remaining())
            if wait <= 0:
                self.logger.error(lambda: "Error waiting for node to reach minimum age: deadline exceeded")
                return False
            self.logger.info(lambda: f"Node {node_name} is {int(age)}s old; waiting {int(wait)}s")
            await asyncio.sleep(wait)

    async def wait_for_kuberhealthy(self, ping: Ping) -> bool:
        while True:
            if await ping():
                return True
            wait = min(self.interval_s, self._remaining())
            if wait <= 0:
                self.logger.error(lambda: "Error waiting for Kuberhealthy to be ready: deadline exceeded")
                return False
            await asyncio.sleep(wait)
