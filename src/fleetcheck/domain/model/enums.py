"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class FindingKind(StrEnum):
    HOSTNAME_RESOLUTION_FAILED = "hostname_resolution_failed"
    HOSTNAME_IS_LOOPBACK = "hostname_is_loopback"
    HOSTNAME_NOT_UNIQUE = "hostname_not_unique"
    IP_IS_LOOPBACK = "ip_is_loopback"
    IP_NOT_UNIQUE = "ip_not_unique"
    NODE_HAS_NO_ACTIVE_CARTRIDGES = "node_has_no_active_cartridges"
    PROFILE_MISSING_REQUIRED_CARTRIDGE = "profile_missing_required_cartridge"
    BROKER_CATALOG_IMPORT_GAP = "broker_catalog_import_gap"
    NODE_PROFILE_SET_MISMATCH = "node_profile_set_mismatch"
    NODE_VERSION_MISMATCH = "node_version_mismatch"
    OBSOLETE_CARTRIDGES_PRESENT = "obsolete_cartridges_present"


class Severity(StrEnum):
    """Whether a finding counts towards the run's failure status."""

    FAILURE = "failure"
    ADVISORY = "advisory"


class FactName(StrEnum):
    """Node facts requested from the fact provider."""

    PROFILE = "profile"
    PUBLIC_HOSTNAME = "public_hostname"
    PUBLIC_IP = "public_ip"
