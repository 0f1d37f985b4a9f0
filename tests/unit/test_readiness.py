from datetime import datetime, timedelta, timezone

import pytest
from unittest.mock import AsyncMock, patch

from application.services.dns_check.readiness import NodeReadinessGate, node_age_seconds
from tests.fakes import FakeDirectory


def node(created: datetime) -> dict:
    return {"metadata": {"name": "node-a", "creationTimestamp": created.strftime("%Y-%m-%dT%H:%M:%SZ")}}


def test_node_age_seconds():
    now = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert node_age_seconds(node(now - timedelta(minutes=10)), now) == 600.0
    assert node_age_seconds({"metadata": {}}, now) is None


@pytest.mark.asyncio
async def test_old_node_passes_immediately(logger):
    created = datetime.now(timezone.utc) - timedelta(hours=1)
    gate = NodeReadinessGate(FakeDirectory(nodes={"node-a": node(created)}), logger)

    with patch("application.services.dns_check.readiness.asyncio.sleep", new=AsyncMock()) as sleep:
        assert await gate.wait_for_node_age("node-a", 180)

    sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_young_node_waits_for_remaining_age(logger):
    created = (datetime.now(timezone.utc) - timedelta(seconds=170)).replace(microsecond=0)
    directory = FakeDirectory(nodes={"node-a": node(created)})
    gate = NodeReadinessGate(directory, logger, limit_s=60)

    async def fake_sleep(seconds):
        # age the node instead of waiting
        directory.nodes["node-a"] = node(created - timedelta(seconds=seconds))

    with patch("application.services.dns_check.readiness.asyncio.sleep", new=fake_sleep):
        assert await gate.wait_for_node_age("node-a", 180)


@pytest.mark.asyncio
async def test_node_lookup_error_does_not_block(logger):
    gate = NodeReadinessGate(FakeDirectory(error=RuntimeError("forbidden")), logger)
    assert await gate.wait_for_node_age("node-a", 180) is False


@pytest.mark.asyncio
async def test_gate_gives_up_at_limit(logger):
    created = datetime.now(timezone.utc)
    gate = NodeReadinessGate(FakeDirectory(nodes={"node-a": node(created)}), logger, limit_s=0)
    assert await gate.wait_for_node_age("node-a", 180) is False


@pytest.mark.asyncio
async def test_wait_for_kuberhealthy_polls_until_ready(logger):
    ping = AsyncMock(side_effect=[False, False, True])
    gate = NodeReadinessGate(FakeDirectory(), logger, limit_s=60, interval_s=5)

    with patch("application.services.dns_check.readiness.asyncio.sleep", new=AsyncMock()) as sleep:
        assert await gate.wait_for_kuberhealthy(ping)

    assert ping.await_count == 3
    assert sleep.await_count == 2


@pytest.mark.asyncio
async def test_wait_for_kuberhealthy_gives_up(logger):
    ping = AsyncMock(return_value=False)
    gate = NodeReadinessGate(FakeDirectory(), logger, limit_s=0)
    assert await gate.wait_for_kuberhealthy(ping) is False
    ping.assert_awaited_once()
