"""Derive profile aggregates from per-node inventories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .contracts import Profile

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fleetcheck.domain.inventory import NodeInventory
    from fleetcheck.domain.model import NodeId, ProfileName


def build_profiles(
    inventories: Mapping[NodeId, NodeInventory],
    node_profiles: Mapping[NodeId, ProfileName | None],
) -> dict[ProfileName, Profile]:
    """Group inventoried nodes by profile; nodes without a profile are left out."""

    members: dict[ProfileName, list[NodeId]] = {}
    cartridges: dict[ProfileName, set[str]] = {}
    for node_id in sorted(inventories):
        profile = node_profiles.get(node_id)
        if profile is None:
            continue
        members.setdefault(profile, []).append(node_id)
        cartridges.setdefault(profile, set()).update(inventories[node_id].active_names)

    return {
        name: Profile(
            name=name,
            node_ids=tuple(members[name]),
            cartridges=frozenset(cartridges[name]),
        )
        for name in sorted(members)
    }


__all__ = ["build_profiles"]
