"""Partition the broker's cartridge catalog into disabled/downloaded/obsolete/active."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from fleetcheck.domain.model import CartridgeRecord

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogPartition:
    """Disjoint name sets derived from the broker's latest cartridges.

    ``active`` maps each broker-active name to its single latest record.
    """

    disabled: frozenset[str] = frozenset()
    downloaded: frozenset[str] = frozenset()
    obsolete: frozenset[str] = frozenset()
    active: Mapping[str, CartridgeRecord] = field(default_factory=dict)

    @property
    def active_names(self) -> frozenset[str]:
        return frozenset(self.active)

    @property
    def excluded(self) -> frozenset[str]:
        """Names left out of every active-set comparison."""

        return self.disabled | self.downloaded

    @property
    def active_identities(self) -> dict[str, str]:
        return {name: record.identity for name, record in self.active.items()}


def latest_per_name(records: Iterable[CartridgeRecord]) -> list[CartridgeRecord]:
    """Keep the first record seen for each name; input is ordered latest-first."""

    seen: set[str] = set()
    latest: list[CartridgeRecord] = []
    for record in records:
        if record.name in seen:
            continue
        seen.add(record.name)
        latest.append(record)
    return latest


def partition_catalog(records: Iterable[CartridgeRecord]) -> CatalogPartition:
    """Split the broker catalog into the four disjoint cartridge name sets."""

    disabled: set[str] = set()
    downloaded: set[str] = set()
    obsolete: set[str] = set()
    active: dict[str, CartridgeRecord] = {}

    for record in latest_per_name(records):
        if record.is_disabled:
            disabled.add(record.name)
        elif record.is_downloaded:
            downloaded.add(record.name)
        elif record.obsolete:
            obsolete.add(record.name)
        else:
            active[record.name] = record

    log.debug(
        "Partitioned broker catalog: active=%s, disabled=%s, downloaded=%s, obsolete=%s",
        len(active),
        len(disabled),
        len(downloaded),
        len(obsolete),
    )
    return CatalogPartition(
        disabled=frozenset(disabled),
        downloaded=frozenset(downloaded),
        obsolete=frozenset(obsolete),
        active=active,
    )


__all__ = ["CatalogPartition", "latest_per_name", "partition_catalog"]
