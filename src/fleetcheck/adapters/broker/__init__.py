"""Public interface for the broker adapter."""

from __future__ import annotations

from .client import BrokerAPIError, BrokerCatalogClient
from .schema import CartridgeListResponse, CartridgePayload
from .translator import parse_cartridge, parse_cartridge_list

__all__ = [
    "BrokerAPIError",
    "BrokerCatalogClient",
    "CartridgeListResponse",
    "CartridgePayload",
    "parse_cartridge",
    "parse_cartridge_list",
]
