"""Public domain model surface."""

from __future__ import annotations

from fleetcheck.domain.model.cartridge import CartridgeRecord
from fleetcheck.domain.model.enums import FactName, FindingKind, Severity
from fleetcheck.domain.model.findings import (
    BrokerCatalogImportGap,
    CartridgeNames,
    Finding,
    HostnameIsLoopback,
    HostnameNotUnique,
    HostnameResolutionFailed,
    IPIsLoopback,
    IPNotUnique,
    NodeHasNoActiveCartridges,
    NodeProfileSetMismatch,
    NodeVersionMismatch,
    ObsoleteCartridgesPresent,
    ProfileMissingRequiredCartridge,
)
from fleetcheck.domain.model.node import NodeFacts, NodeId, ProfileName
from fleetcheck.domain.model.report import AuditReport

__all__ = [
    "AuditReport",
    "BrokerCatalogImportGap",
    "CartridgeNames",
    "CartridgeRecord",
    "FactName",
    "Finding",
    "FindingKind",
    "HostnameIsLoopback",
    "HostnameNotUnique",
    "HostnameResolutionFailed",
    "IPIsLoopback",
    "IPNotUnique",
    "NodeFacts",
    "NodeHasNoActiveCartridges",
    "NodeId",
    "NodeProfileSetMismatch",
    "NodeVersionMismatch",
    "ObsoleteCartridgesPresent",
    "ProfileMissingRequiredCartridge",
    "ProfileName",
    "Severity",
]
