"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from fleetcheck.adapters.broker import BrokerCatalogClient
from fleetcheck.adapters.dns import resolve_hostname
from fleetcheck.adapters.node_agent import NodeAgentClient
from fleetcheck.adapters.restrictions import load_restrictions
from fleetcheck.config import (
    DEFAULT_WAIT_SECONDS,
    get_audit_config,
    get_broker_config,
    get_node_agent_config,
)
from fleetcheck.domain.audit import collect_context, run_checks

if TYPE_CHECKING:
    from fleetcheck.config import AuditConfig
    from fleetcheck.domain.model import AuditReport
    from fleetcheck.domain.ports import (
        BrokerCatalogSource,
        FactProvider,
        HostnameResolver,
        NodeCartridgeSource,
    )
    from fleetcheck.domain.reconciliation import Restrictions


log = getLogger(__name__)


def run_audit(
    *,
    wait_seconds: float = DEFAULT_WAIT_SECONDS,
    facts: FactProvider | None = None,
    inventories: NodeCartridgeSource | None = None,
    catalog: BrokerCatalogSource | None = None,
    resolver: HostnameResolver | None = None,
    restrictions: Restrictions | None = None,
    audit_config: AuditConfig | None = None,
) -> AuditReport:
    """Fetch one snapshot of the fleet and run every consistency check against it.

    Adapters not supplied are built from the environment. One node agent client
    serves as both fact provider and cartridge source so inventories are requested
    from the agents that answered the fact request. ``facts`` and ``inventories``
    are therefore supplied together or not at all.
    """

    if (facts is None) != (inventories is None):
        msg = "facts and inventories must be supplied together"
        raise ValueError(msg)

    effective_config = audit_config or get_audit_config()
    if facts is None or inventories is None:
        agent = NodeAgentClient(
            config=get_node_agent_config(wait_seconds=wait_seconds),
            max_parallel=effective_config.max_parallel,
        )
        facts = agent
        inventories = agent
    effective_catalog = catalog or BrokerCatalogClient(config=get_broker_config())
    effective_resolver = resolver or resolve_hostname
    if restrictions is None and effective_config.restrictions_file is not None:
        restrictions = load_restrictions(effective_config.restrictions_file)

    log.info(
        "Starting audit: wait=%ss, max_parallel=%s, restricted=%s",
        wait_seconds,
        effective_config.max_parallel,
        restrictions is not None,
    )

    context = asyncio.run(
        collect_context(
            facts=facts,
            inventories=inventories,
            catalog=effective_catalog,
            restrictions=restrictions,
            max_parallel=effective_config.max_parallel,
        )
    )
    return run_checks(context, resolve=effective_resolver)
