"""Validate advertised public hostnames and IP addresses across nodes."""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fleetcheck.domain.model import (
    HostnameIsLoopback,
    HostnameNotUnique,
    HostnameResolutionFailed,
    IPIsLoopback,
    IPNotUnique,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fleetcheck.domain.model import Finding, NodeFacts, NodeId
    from fleetcheck.domain.ports import HostnameResolver

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolved:
    address: str


@dataclass(frozen=True, slots=True)
class Unresolvable:
    reason: str


type Resolution = Resolved | Unresolvable


def as_fqdn(hostname: str) -> str:
    """Return ``hostname`` in trailing-dot form so no search domain is appended."""

    return hostname if hostname.endswith(".") else f"{hostname}."


def is_loopback(address: str) -> bool:
    try:
        return ipaddress.ip_address(address).is_loopback
    except ValueError:
        log.warning("Not an IP address: %r", address)
        return False


def check_hostnames(nodes: Iterable[NodeFacts], resolve: HostnameResolver) -> list[Finding]:
    """Every public hostname must resolve to a non-loopback address and be unique."""

    findings: list[Finding] = []
    owners: dict[str, list[NodeId]] = {}

    for node in sorted(nodes, key=lambda item: item.node_id):
        hostname = node.public_hostname
        if hostname is None:
            continue
        owners.setdefault(hostname.rstrip(".").lower(), []).append(node.node_id)

        match resolve(as_fqdn(hostname)):
            case Unresolvable(reason=reason):
                findings.append(
                    HostnameResolutionFailed(node_id=node.node_id, hostname=hostname, reason=reason)
                )
            case Resolved(address=address) if is_loopback(address):
                findings.append(
                    HostnameIsLoopback(node_id=node.node_id, hostname=hostname, address=address)
                )
            case Resolved():
                pass

    if not owners:
        log.debug("No node reported a public hostname; skipping hostname checks")

    findings.extend(
        HostnameNotUnique(hostname=hostname, node_ids=tuple(node_ids))
        for hostname, node_ids in sorted(owners.items())
        if len(node_ids) > 1
    )
    return findings


def check_ips(nodes: Iterable[NodeFacts]) -> list[Finding]:
    """Every public IP must be non-loopback and unique."""

    findings: list[Finding] = []
    owners: dict[str, list[NodeId]] = {}

    for node in sorted(nodes, key=lambda item: item.node_id):
        address = node.public_ip
        if address is None:
            continue
        owners.setdefault(address, []).append(node.node_id)
        if is_loopback(address):
            findings.append(IPIsLoopback(node_id=node.node_id, address=address))

    if not owners:
        log.debug("No node reported a public IP; skipping IP checks")

    findings.extend(
        IPNotUnique(address=address, node_ids=tuple(node_ids))
        for address, node_ids in sorted(owners.items())
        if len(node_ids) > 1
    )
    return findings


__all__ = [
    "Resolution",
    "Resolved",
    "Unresolvable",
    "as_fqdn",
    "check_hostnames",
    "check_ips",
    "is_loopback",
]
