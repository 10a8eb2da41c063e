"""Cartridge reconciliation between the broker catalog, profiles and nodes.

Flow:
1) partition the broker catalog (``fleetcheck.domain.catalog``)
2) normalize each node's inventory (``fleetcheck.domain.inventory``)
3) aggregate nodes into profiles
4) run the independent checks of ``ReconciliationEngine`` over the frozen snapshot
"""

from __future__ import annotations

from .contracts import CartridgeCheck, CartridgeSnapshot, Profile, Restrictions
from .engine import (
    DEFAULT_CHECKS,
    ReconciliationEngine,
    check_broker_import_gap,
    check_empty_nodes,
    check_node_sets,
    check_node_versions,
    check_profile_coverage,
    report_obsolete_cartridges,
)
from .profiles import build_profiles

__all__ = [
    "DEFAULT_CHECKS",
    "CartridgeCheck",
    "CartridgeSnapshot",
    "Profile",
    "ReconciliationEngine",
    "Restrictions",
    "build_profiles",
    "check_broker_import_gap",
    "check_empty_nodes",
    "check_node_sets",
    "check_node_versions",
    "check_profile_coverage",
    "report_obsolete_cartridges",
]
