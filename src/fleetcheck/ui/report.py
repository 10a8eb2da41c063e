"""Render audit findings as human-readable lines."""

# ruff: noqa: T201

from __future__ import annotations

import sys
from functools import singledispatch
from typing import TYPE_CHECKING, TextIO

from fleetcheck.domain.model import (
    BrokerCatalogImportGap,
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

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fleetcheck.domain.model import AuditReport, Finding

MAX_EXIT_STATUS = 255


def _names(values: Iterable[str]) -> str:
    return ", ".join(values) or "(none)"


@singledispatch
def render_finding(finding: object) -> str:
    raise TypeError(f"Cannot render {type(finding).__name__}")


@render_finding.register
def _(finding: HostnameResolutionFailed) -> str:
    return (
        f"{finding.node_id}: public hostname {finding.hostname} cannot be resolved "
        f"as a fully-qualified name ({finding.reason})"
    )


@render_finding.register
def _(finding: HostnameIsLoopback) -> str:
    return (
        f"{finding.node_id}: public hostname {finding.hostname} resolves to loopback "
        f"address {finding.address}; it must resolve to a public address"
    )


@render_finding.register
def _(finding: HostnameNotUnique) -> str:
    return f"public hostname {finding.hostname} is shared by nodes: {_names(finding.node_ids)}"


@render_finding.register
def _(finding: IPIsLoopback) -> str:
    return f"{finding.node_id}: public IP {finding.address} is a loopback address"


@render_finding.register
def _(finding: IPNotUnique) -> str:
    return f"public IP {finding.address} is shared by nodes: {_names(finding.node_ids)}"


@render_finding.register
def _(finding: NodeHasNoActiveCartridges) -> str:
    return f"{finding.node_id}: no active cartridges found; the installation is probably broken"


@render_finding.register
def _(finding: ProfileMissingRequiredCartridge) -> str:
    gaps = "; ".join(f"{profile}: {_names(names)}" for profile, names in finding.missing)
    if finding.restricted:
        return f"profiles are missing cartridges they are required to offer ({gaps})"
    return (
        "profiles do not offer every broker cartridge; not enforced without a "
        f"restriction mapping ({gaps})"
    )


@render_finding.register
def _(finding: BrokerCatalogImportGap) -> str:
    return (
        "cartridges offered by nodes have not been imported into the broker: "
        f"{_names(finding.cartridges)}"
    )


@render_finding.register
def _(finding: NodeProfileSetMismatch) -> str:
    profile = finding.profile or "no profile"
    parts: list[str] = []
    if finding.missing:
        parts.append(f"missing cartridges its profile offers: {_names(finding.missing)}")
    if finding.extra:
        parts.append(f"extra cartridges unknown to the broker: {_names(finding.extra)}")
    return f"{finding.node_id} ({profile}): {'; '.join(parts)}"


@render_finding.register
def _(finding: NodeVersionMismatch) -> str:
    return (
        f"{finding.node_id}: cartridge versions differ from the broker; "
        f"broker expects: {_names(finding.broker_expected)}; "
        f"node has: {_names(finding.node_has)}"
    )


@render_finding.register
def _(finding: ObsoleteCartridgesPresent) -> str:
    if finding.node_id is None:
        return f"broker lists obsolete cartridges: {_names(finding.cartridges)}"
    return f"{finding.node_id}: obsolete cartridges installed: {_names(finding.cartridges)}"


def exit_status(failure_count: int) -> int:
    """Failure count as a process status; capped so it never wraps to 0."""

    return min(failure_count, MAX_EXIT_STATUS)


def write_report(
    report: AuditReport,
    *,
    verbose: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Print notices and ``PASS`` to ``out`` or failures to ``err``; return the exit status."""

    out = out or sys.stdout
    err = err or sys.stderr

    if verbose:
        for advisory in report.advisories:
            print(f"NOTICE: {render_finding(advisory)}", file=out)

    failures: tuple[Finding, ...] = report.failures
    if not failures:
        print("PASS", file=out)
        return 0

    print(f"{len(failures)} ERRORS", file=err)
    for finding in failures:
        print(render_finding(finding), file=err)
    return exit_status(len(failures))


__all__ = ["MAX_EXIT_STATUS", "exit_status", "render_finding", "write_report"]
