"""Cross-compare the broker catalog, profile aggregates and node inventories.

Every check reads the same frozen ``CartridgeSnapshot`` and returns its own findings;
none of them short-circuits another. The engine keeps no state between runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fleetcheck.domain.model import (
    BrokerCatalogImportGap,
    NodeHasNoActiveCartridges,
    NodeProfileSetMismatch,
    NodeVersionMismatch,
    ObsoleteCartridgesPresent,
    ProfileMissingRequiredCartridge,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fleetcheck.domain.model import CartridgeNames, Finding, ProfileName

    from .contracts import CartridgeCheck, CartridgeSnapshot, Profile, Restrictions

log = logging.getLogger(__name__)


def check_empty_nodes(snapshot: CartridgeSnapshot) -> list[Finding]:
    """A node without any active cartridge is most likely a broken installation."""

    return [
        NodeHasNoActiveCartridges(node_id=node_id)
        for node_id, inventory in sorted(snapshot.inventories.items())
        if not inventory.active_names
    ]


def check_profile_coverage(snapshot: CartridgeSnapshot) -> list[Finding]:
    """Profiles must offer the broker-active cartridges they are expected to offer.

    With a restriction mapping, a restricted cartridge is required only on its listed
    profiles and every other broker-active cartridge on all profiles; gaps are failures.
    Without one, every profile must offer everything and gaps are advisory.
    """

    restrictions = snapshot.restrictions
    missing: dict[ProfileName, list[str]] = {}
    for name in sorted(snapshot.catalog.active_names):
        for profile in _profiles_requiring(name, snapshot.profiles, restrictions):
            if name not in profile.cartridges:
                missing.setdefault(profile.name, []).append(name)

    if not missing:
        return []
    gaps: tuple[tuple[ProfileName, CartridgeNames], ...] = tuple(
        (profile, tuple(names)) for profile, names in sorted(missing.items())
    )
    return [ProfileMissingRequiredCartridge.build(gaps, restricted=restrictions is not None)]


def _profiles_requiring(
    name: str,
    profiles: Mapping[ProfileName, Profile],
    restrictions: Restrictions | None,
) -> list[Profile]:
    if restrictions is None or name not in restrictions:
        return [profiles[key] for key in sorted(profiles)]

    selected: list[Profile] = []
    for profile_name in dict.fromkeys(restrictions[name]):
        profile = profiles.get(profile_name)
        if profile is None:
            log.debug("Cartridge %s restricted to unknown profile %s", name, profile_name)
            continue
        selected.append(profile)
    return selected


def check_broker_import_gap(snapshot: CartridgeSnapshot) -> list[Finding]:
    """Cartridges offered by some profile must have been imported by the broker."""

    offered: set[str] = set()
    for profile in snapshot.profiles.values():
        offered.update(profile.cartridges)
    not_imported = offered - snapshot.catalog.active_names
    if not not_imported:
        return []
    return [BrokerCatalogImportGap(cartridges=tuple(sorted(not_imported)))]


def check_node_sets(snapshot: CartridgeSnapshot) -> list[Finding]:
    """Each node must offer its profile's cartridges and nothing the broker lacks."""

    broker_names = snapshot.catalog.active_names
    findings: list[Finding] = []
    for node_id, inventory in sorted(snapshot.inventories.items()):
        node_names = set(inventory.active_names)
        profile = snapshot.profile_of(node_id)
        expected = profile.cartridges if profile is not None else frozenset()
        missing = tuple(sorted(expected - node_names))
        extra = tuple(sorted(node_names - broker_names))
        if missing or extra:
            findings.append(
                NodeProfileSetMismatch(
                    node_id=node_id,
                    profile=profile.name if profile is not None else None,
                    missing=missing,
                    extra=extra,
                )
            )
    return findings


def check_node_versions(snapshot: CartridgeSnapshot) -> list[Finding]:
    """Each node's latest cartridge versions must match the broker's."""

    broker_identities = snapshot.catalog.active_identities
    known_identities = set(broker_identities.values())
    findings: list[Finding] = []
    for node_id, inventory in sorted(snapshot.inventories.items()):
        broker_expected = tuple(
            sorted(
                broker_identities[name]
                for name, identity in inventory.latest.items()
                if name in broker_identities and broker_identities[name] != identity
            )
        )
        node_has = tuple(
            sorted(
                identity
                for identity in inventory.latest.values()
                if identity not in known_identities
            )
        )
        if broker_expected or node_has:
            findings.append(
                NodeVersionMismatch(
                    node_id=node_id,
                    broker_expected=broker_expected,
                    node_has=node_has,
                )
            )
    return findings


def report_obsolete_cartridges(snapshot: CartridgeSnapshot) -> list[Finding]:
    """Advisory notices for obsolete cartridges on the broker and on nodes."""

    findings: list[Finding] = []
    if snapshot.catalog.obsolete:
        findings.append(
            ObsoleteCartridgesPresent(
                node_id=None,
                cartridges=tuple(sorted(snapshot.catalog.obsolete)),
            )
        )
    findings.extend(
        ObsoleteCartridgesPresent(node_id=node_id, cartridges=inventory.obsolete_names)
        for node_id, inventory in sorted(snapshot.inventories.items())
        if inventory.obsolete_names
    )
    return findings


DEFAULT_CHECKS: tuple[CartridgeCheck, ...] = (
    check_empty_nodes,
    check_profile_coverage,
    check_broker_import_gap,
    check_node_sets,
    check_node_versions,
    report_obsolete_cartridges,
)


@dataclass(slots=True)
class ReconciliationEngine:
    """Run every cartridge check against one snapshot."""

    checks: tuple[CartridgeCheck, ...] = field(default=DEFAULT_CHECKS)

    def reconcile(self, snapshot: CartridgeSnapshot) -> list[Finding]:
        """Return the findings of all checks, in check order."""

        findings: list[Finding] = []
        for check in self.checks:
            findings.extend(check(snapshot))
        return findings


__all__ = [
    "DEFAULT_CHECKS",
    "ReconciliationEngine",
    "check_broker_import_gap",
    "check_empty_nodes",
    "check_node_sets",
    "check_node_versions",
    "check_profile_coverage",
    "report_obsolete_cartridges",
]
