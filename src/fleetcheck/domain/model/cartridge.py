"""Cartridge records as reported by the broker and by nodes."""

from __future__ import annotations

from dataclasses import dataclass

from fleetcheck.domain.versions import version_key


@dataclass(frozen=True, slots=True, kw_only=True)
class CartridgeRecord:
    """One installable cartridge at one version.

    A missing ``priority`` means the cartridge is disabled; a ``manifest_url`` means
    it was downloaded from outside the broker's own catalog.
    """

    name: str
    vendor: str
    version: str
    priority: int | None = None
    manifest_url: str | None = None
    obsolete: bool = False

    @property
    def identity(self) -> str:
        """Canonical ``vendor-name-version`` string used for version comparisons."""

        return f"{self.vendor}-{self.name}-{self.version}"

    @property
    def is_disabled(self) -> bool:
        return self.priority is None

    @property
    def is_downloaded(self) -> bool:
        return self.manifest_url is not None

    def sort_key(self) -> tuple[str, str, str]:
        return (self.name, version_key(self.version), self.vendor)


__all__ = ["CartridgeRecord"]
