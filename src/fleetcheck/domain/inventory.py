"""Normalize one node's cartridge inventory for comparison against the broker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fleetcheck.domain.model import CartridgeRecord, NodeId


@dataclass(frozen=True, slots=True)
class NodeInventory:
    """Comparable view of a node's active cartridges.

    ``active_names`` is sorted and deduplicated. ``latest`` maps each active name to
    the identity string of its highest installed version.
    """

    node_id: NodeId
    active_names: tuple[str, ...] = ()
    latest: dict[str, str] = field(default_factory=dict)
    obsolete_names: tuple[str, ...] = ()


def normalize_inventory(
    node_id: NodeId,
    records: Iterable[CartridgeRecord],
    *,
    excluded: frozenset[str],
) -> NodeInventory:
    """Build the normalized inventory for ``node_id``.

    Records named in ``excluded`` (the broker's disabled and downloaded names) are
    dropped first. Obsolete records are kept aside for reporting only.
    """

    active: list[CartridgeRecord] = []
    obsolete: set[str] = set()
    for record in records:
        if record.name in excluded:
            continue
        if record.obsolete:
            obsolete.add(record.name)
        else:
            active.append(record)

    # stable sort, so for equal keys the record listed last wins
    latest: dict[str, str] = {}
    for record in sorted(active, key=lambda item: item.sort_key()):
        latest[record.name] = record.identity

    return NodeInventory(
        node_id=node_id,
        active_names=tuple(sorted({record.name for record in active})),
        latest=latest,
        obsolete_names=tuple(sorted(obsolete)),
    )


__all__ = ["NodeInventory", "normalize_inventory"]
