"""Shared inputs for the cartridge reconciliation checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from fleetcheck.domain.catalog import CatalogPartition
    from fleetcheck.domain.inventory import NodeInventory
    from fleetcheck.domain.model import Finding, NodeId, ProfileName

type Restrictions = Mapping[str, Sequence[ProfileName]]


@dataclass(frozen=True, slots=True)
class Profile:
    """Nodes sharing a profile value and the union of their active cartridge names."""

    name: ProfileName
    node_ids: tuple[NodeId, ...]
    cartridges: frozenset[str]


@dataclass(frozen=True, slots=True, kw_only=True)
class CartridgeSnapshot:
    """Frozen, normalized view of one run that every check reads from."""

    catalog: CatalogPartition
    inventories: Mapping[NodeId, NodeInventory]
    node_profiles: Mapping[NodeId, ProfileName | None] = field(default_factory=dict)
    profiles: Mapping[ProfileName, Profile] = field(default_factory=dict)
    restrictions: Restrictions | None = None

    def profile_of(self, node_id: NodeId) -> Profile | None:
        name = self.node_profiles.get(node_id)
        if name is None:
            return None
        return self.profiles.get(name)


class CartridgeCheck(Protocol):
    """One independent reconciliation check."""

    def __call__(self, snapshot: CartridgeSnapshot) -> list[Finding]: ...


__all__ = ["CartridgeCheck", "CartridgeSnapshot", "Profile", "Restrictions"]
