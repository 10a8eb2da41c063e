"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import BrokerCatalogSource, FactProvider, NodeCartridgeSource
from .resolving import HostnameResolver

__all__ = [
    "BrokerCatalogSource",
    "FactProvider",
    "HostnameResolver",
    "NodeCartridgeSource",
]
