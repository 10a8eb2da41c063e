"""Collect one run's facts and evaluate every check against them."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fleetcheck.domain.catalog import partition_catalog
from fleetcheck.domain.context import AuditContext
from fleetcheck.domain.errors import NoNodesRespondedError
from fleetcheck.domain.inventory import normalize_inventory
from fleetcheck.domain.model import AuditReport, FactName, NodeFacts
from fleetcheck.domain.network import check_hostnames, check_ips
from fleetcheck.domain.reconciliation import (
    CartridgeSnapshot,
    ReconciliationEngine,
    build_profiles,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fleetcheck.domain.model import CartridgeRecord, NodeId
    from fleetcheck.domain.ports import (
        BrokerCatalogSource,
        FactProvider,
        HostnameResolver,
        NodeCartridgeSource,
    )
    from fleetcheck.domain.reconciliation import Restrictions

DEFAULT_MAX_PARALLEL = 16
REQUESTED_FACTS: tuple[FactName, ...] = (
    FactName.PROFILE,
    FactName.PUBLIC_HOSTNAME,
    FactName.PUBLIC_IP,
)

log = logging.getLogger(__name__)


async def collect_context(
    *,
    facts: FactProvider,
    inventories: NodeCartridgeSource,
    catalog: BrokerCatalogSource,
    restrictions: Restrictions | None = None,
    max_parallel: int = DEFAULT_MAX_PARALLEL,
) -> AuditContext:
    """Fetch facts, the broker catalog and node inventories into one frozen context.

    Raises ``NoNodesRespondedError`` when the fact request reached no node.
    """

    raw_facts = await facts.get_facts(REQUESTED_FACTS)
    if not raw_facts:
        raise NoNodesRespondedError
    node_facts = {
        node_id: NodeFacts.from_mapping(node_id, values) for node_id, values in raw_facts.items()
    }
    log.info("Facts received from %s node(s)", len(node_facts))

    broker_records, node_records = await asyncio.gather(
        catalog.latest(),
        _gather_inventories(inventories, sorted(node_facts), max_parallel=max_parallel),
    )
    log.info(
        "Inventories received from %s of %s node(s); broker lists %s cartridge record(s)",
        len(node_records),
        len(node_facts),
        len(broker_records),
    )
    return AuditContext(
        facts=node_facts,
        inventories=node_records,
        catalog=tuple(broker_records),
        restrictions=restrictions,
    )


async def _gather_inventories(
    source: NodeCartridgeSource,
    node_ids: Iterable[NodeId],
    *,
    max_parallel: int,
) -> dict[NodeId, tuple[CartridgeRecord, ...]]:
    semaphore = asyncio.Semaphore(max_parallel)

    async def fetch(node_id: NodeId) -> list[CartridgeRecord]:
        async with semaphore:
            return await source.get_inventory(node_id)

    ordered = list(node_ids)
    results = await asyncio.gather(*(fetch(node_id) for node_id in ordered), return_exceptions=True)

    collected: dict[NodeId, tuple[CartridgeRecord, ...]] = {}
    for node_id, result in zip(ordered, results, strict=True):
        if isinstance(result, Exception):
            log.warning("Excluding node %s: inventory request failed: %s", node_id, result)
            continue
        if isinstance(result, BaseException):
            raise result
        collected[node_id] = tuple(result)
    return collected


def build_snapshot(context: AuditContext) -> CartridgeSnapshot:
    """Normalize the context into the frozen view the cartridge checks read."""

    partition = partition_catalog(context.catalog)
    normalized = {
        node_id: normalize_inventory(node_id, records, excluded=partition.excluded)
        for node_id, records in context.inventories.items()
    }
    node_profiles = {node_id: facts.profile for node_id, facts in context.facts.items()}
    return CartridgeSnapshot(
        catalog=partition,
        inventories=normalized,
        node_profiles=node_profiles,
        profiles=build_profiles(normalized, node_profiles),
        restrictions=context.restrictions,
    )


def run_checks(
    context: AuditContext,
    *,
    resolve: HostnameResolver,
    engine: ReconciliationEngine | None = None,
) -> AuditReport:
    """Run the network identity and cartridge checks; findings accumulate in order."""

    if not context.facts:
        raise NoNodesRespondedError

    report = AuditReport()
    nodes = [context.facts[node_id] for node_id in context.node_ids]
    report.extend(check_hostnames(nodes, resolve))
    report.extend(check_ips(nodes))

    active_engine = engine or ReconciliationEngine()
    report.extend(active_engine.reconcile(build_snapshot(context)))

    log.info(
        "Audit finished: failures=%s, advisories=%s",
        report.failure_count,
        len(report.advisories),
    )
    return report


__all__ = [
    "DEFAULT_MAX_PARALLEL",
    "REQUESTED_FACTS",
    "build_snapshot",
    "collect_context",
    "run_checks",
]
