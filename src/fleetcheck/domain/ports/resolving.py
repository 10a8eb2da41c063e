"""Port for hostname resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fleetcheck.domain.network import Resolution


@runtime_checkable
class HostnameResolver(Protocol):
    """Resolve a hostname to one address without raising."""

    def __call__(self, hostname: str) -> Resolution: ...


__all__ = ["HostnameResolver"]
