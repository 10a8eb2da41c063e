"""Translate cartridge payloads into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fleetcheck.domain.model import CartridgeRecord

from .schema import CartridgeListResponse, CartridgePayload

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_cartridge(payload: CartridgePayload | Mapping[str, object]) -> CartridgeRecord:
    model = (
        payload
        if isinstance(payload, CartridgePayload)
        else CartridgePayload.model_validate(payload)
    )
    return CartridgeRecord(
        name=model.name,
        vendor=model.vendor,
        version=model.version,
        priority=model.priority,
        manifest_url=model.manifest_url,
        obsolete=model.obsolete,
    )


def parse_cartridge_list(payload: object) -> list[CartridgeRecord]:
    """Validate a ``{"cartridges": [...]}`` document, keeping the listed order."""

    response = CartridgeListResponse.model_validate(payload)
    return [parse_cartridge(item) for item in response.cartridges]
