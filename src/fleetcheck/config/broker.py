"""Broker catalog API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig

BROKER_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class BrokerConfig:
    """Holds broker API configuration values."""

    base_url: str
    token: str | None
    resilience: ResilienceConfig


def get_broker_config(*, resilience: ResilienceConfig | None = None) -> BrokerConfig:
    values = require_env_vars(("FLEETCHECK_BROKER_URL",))
    base_url = values["FLEETCHECK_BROKER_URL"].rstrip("/")
    token = optional_env_var("FLEETCHECK_BROKER_TOKEN")
    headers = {"Authorization": f"Bearer {token}"} if token else None
    return BrokerConfig(
        base_url=base_url,
        token=token,
        resilience=resilience
        or ResilienceConfig(
            name="broker",
            base_url=base_url,
            timeout_seconds=BROKER_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            cache=CacheConfig(),
            default_headers=headers,
        ),
    )
