"""Classified mismatches produced by the audit checks.

Findings are plain values. Rendering them into human messages is left to the
presentation layer (``fleetcheck.ui.report``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .enums import FindingKind, Severity
from .node import NodeId, ProfileName  # noqa: TC001

type CartridgeNames = tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class HostnameResolutionFailed:
    node_id: NodeId
    hostname: str
    reason: str
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.HOSTNAME_RESOLUTION_FAILED] = (
        FindingKind.HOSTNAME_RESOLUTION_FAILED
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class HostnameIsLoopback:
    node_id: NodeId
    hostname: str
    address: str
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.HOSTNAME_IS_LOOPBACK] = FindingKind.HOSTNAME_IS_LOOPBACK


@dataclass(frozen=True, slots=True, kw_only=True)
class HostnameNotUnique:
    hostname: str
    node_ids: tuple[NodeId, ...]
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.HOSTNAME_NOT_UNIQUE] = FindingKind.HOSTNAME_NOT_UNIQUE


@dataclass(frozen=True, slots=True, kw_only=True)
class IPIsLoopback:
    node_id: NodeId
    address: str
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.IP_IS_LOOPBACK] = FindingKind.IP_IS_LOOPBACK


@dataclass(frozen=True, slots=True, kw_only=True)
class IPNotUnique:
    address: str
    node_ids: tuple[NodeId, ...]
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.IP_NOT_UNIQUE] = FindingKind.IP_NOT_UNIQUE


@dataclass(frozen=True, slots=True, kw_only=True)
class NodeHasNoActiveCartridges:
    node_id: NodeId
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.NODE_HAS_NO_ACTIVE_CARTRIDGES] = (
        FindingKind.NODE_HAS_NO_ACTIVE_CARTRIDGES
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class ProfileMissingRequiredCartridge:
    """Profiles lacking broker-active cartridges they are expected to offer.

    ``missing`` pairs each offending profile with the cartridge names it lacks. The
    unrestricted variant is advisory only.
    """

    missing: tuple[tuple[ProfileName, CartridgeNames], ...]
    restricted: bool
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.PROFILE_MISSING_REQUIRED_CARTRIDGE] = (
        FindingKind.PROFILE_MISSING_REQUIRED_CARTRIDGE
    )

    @classmethod
    def build(
        cls,
        missing: tuple[tuple[ProfileName, CartridgeNames], ...],
        *,
        restricted: bool,
    ) -> ProfileMissingRequiredCartridge:
        severity = Severity.FAILURE if restricted else Severity.ADVISORY
        return cls(missing=missing, restricted=restricted, severity=severity)


@dataclass(frozen=True, slots=True, kw_only=True)
class BrokerCatalogImportGap:
    cartridges: CartridgeNames
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.BROKER_CATALOG_IMPORT_GAP] = FindingKind.BROKER_CATALOG_IMPORT_GAP


@dataclass(frozen=True, slots=True, kw_only=True)
class NodeProfileSetMismatch:
    node_id: NodeId
    profile: ProfileName | None
    missing: CartridgeNames
    extra: CartridgeNames
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.NODE_PROFILE_SET_MISMATCH] = FindingKind.NODE_PROFILE_SET_MISMATCH


@dataclass(frozen=True, slots=True, kw_only=True)
class NodeVersionMismatch:
    node_id: NodeId
    broker_expected: tuple[str, ...]
    node_has: tuple[str, ...]
    severity: Severity = Severity.FAILURE
    kind: Literal[FindingKind.NODE_VERSION_MISMATCH] = FindingKind.NODE_VERSION_MISMATCH


@dataclass(frozen=True, slots=True, kw_only=True)
class ObsoleteCartridgesPresent:
    """Obsolete cartridges still listed by the broker (``node_id`` is None) or a node."""

    node_id: NodeId | None
    cartridges: CartridgeNames
    severity: Severity = Severity.ADVISORY
    kind: Literal[FindingKind.OBSOLETE_CARTRIDGES_PRESENT] = (
        FindingKind.OBSOLETE_CARTRIDGES_PRESENT
    )


type Finding = (
    HostnameResolutionFailed
    | HostnameIsLoopback
    | HostnameNotUnique
    | IPIsLoopback
    | IPNotUnique
    | NodeHasNoActiveCartridges
    | ProfileMissingRequiredCartridge
    | BrokerCatalogImportGap
    | NodeProfileSetMismatch
    | NodeVersionMismatch
    | ObsoleteCartridgesPresent
)
