"""HTTP client for the broker's cartridge catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from fleetcheck.adapters.http_resilience import ResilientClient
from fleetcheck.config.broker import BrokerConfig, get_broker_config

from .schema import ErrorResponse
from .translator import parse_cartridge_list

if TYPE_CHECKING:
    from collections.abc import Callable

    from fleetcheck.config.http_resilience import ResilienceConfig
    from fleetcheck.domain.model import CartridgeRecord
    from fleetcheck.domain.ports import BrokerCatalogSource

log = getLogger(__name__)

CARTRIDGES_PATH = "/cartridges"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class BrokerAPIError(RuntimeError):
    """Raised when the broker answers with an error or an unexpected payload."""


@dataclass(slots=True)
class BrokerCatalogClient:
    config: BrokerConfig = field(default_factory=get_broker_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    async def latest(self) -> list[CartridgeRecord]:
        """Fetch the broker's cartridges, keeping the broker's latest-first order."""

        async with self.client_factory(self.config.resilience) as client:
            payload = await client.get_json(CARTRIDGES_PATH)

        if isinstance(payload, dict) and "error" in payload:
            error_payload = ErrorResponse.model_validate(payload)
            log.error(f"Broker API error {error_payload.error}: {error_payload.message}")
            raise BrokerAPIError(error_payload.message or error_payload.error)

        try:
            records = parse_cartridge_list(payload)
        except ValidationError as exc:
            raise BrokerAPIError("Unexpected broker cartridge payload") from exc
        log.debug("Broker listed %s cartridge record(s)", len(records))
        return records


if TYPE_CHECKING:
    _catalog_check: BrokerCatalogSource = BrokerCatalogClient()
