"""Ports for fetching facts and cartridge lists from the broker and nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fleetcheck.domain.model import CartridgeRecord, FactName, NodeId


@runtime_checkable
class FactProvider(Protocol):
    """Ask every reachable node for the named facts.

    Nodes that do not answer within the provider's timeout are left out of the result.
    """

    async def get_facts(
        self,
        fact_names: Sequence[FactName],
    ) -> dict[NodeId, dict[str, str | None]]: ...


@runtime_checkable
class NodeCartridgeSource(Protocol):
    """Return the cartridges installed on one node; safe to await concurrently."""

    async def get_inventory(self, node_id: NodeId) -> list[CartridgeRecord]: ...


@runtime_checkable
class BrokerCatalogSource(Protocol):
    """Return the broker's cartridges, ordered latest-first within each name."""

    async def latest(self) -> list[CartridgeRecord]: ...


__all__ = ["BrokerCatalogSource", "FactProvider", "NodeCartridgeSource"]
