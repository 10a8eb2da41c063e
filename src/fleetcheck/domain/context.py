"""Per-run snapshot of everything fetched from the broker and the nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fleetcheck.domain.model import CartridgeRecord, NodeFacts, NodeId
    from fleetcheck.domain.reconciliation import Restrictions


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditContext:
    """Facts are fetched once per run and never refreshed while checks run.

    ``inventories`` only holds nodes whose cartridge list was retrieved; nodes that
    answered the fact request but not the inventory request stay in ``facts``.
    """

    facts: Mapping[NodeId, NodeFacts]
    inventories: Mapping[NodeId, tuple[CartridgeRecord, ...]] = field(default_factory=dict)
    catalog: tuple[CartridgeRecord, ...] = ()
    restrictions: Restrictions | None = None

    @property
    def node_ids(self) -> tuple[NodeId, ...]:
        return tuple(sorted(self.facts))


__all__ = ["AuditContext"]
