"""Pydantic models describing node agent payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NodeAgentBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class FactsResponse(NodeAgentBaseModel):
    identity: str = Field(min_length=1)
    facts: dict[str, str | None] = Field(default_factory=dict)

    @field_validator("identity", mode="before")
    @classmethod
    def _strip_identity(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("facts", mode="before")
    @classmethod
    def _stringify_values(cls, value: object) -> object:
        if isinstance(value, dict):
            return {
                str(key): None if item is None else str(item)
                for key, item in value.items()  # type: ignore[reportUnknownVariableType]
            }
        return value
