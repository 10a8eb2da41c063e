"""Pydantic models describing cartridge list payloads.

The broker and the node agents share the same cartridge representation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class CartridgeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CartridgePayload(CartridgeBaseModel):
    name: str = Field(min_length=1)
    vendor: str = Field(min_length=1)
    version: str = Field(min_length=1)
    priority: int | None = None
    manifest_url: str | None = Field(default=None, alias="manifestURL")
    obsolete: bool = False

    _normalize_manifest_url = field_validator("manifest_url", mode="before")(_blank_to_none)

    @field_validator("name", "vendor", "version", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class CartridgeListResponse(CartridgeBaseModel):
    cartridges: list[CartridgePayload]


class ErrorResponse(CartridgeBaseModel):
    error: str
    message: str | None = None
