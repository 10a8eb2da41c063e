"""Node agent configuration values."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from .env import require_env_vars, split_env_list
from .errors import ConfigurationError
from .http_resilience import NO_RETRY, ResilienceConfig

DEFAULT_WAIT_SECONDS = 5.0


@dataclass(frozen=True)
class NodeAgentConfig:
    """Where the node agents live and how long to wait for each of them."""

    node_urls: tuple[str, ...]
    resilience: ResilienceConfig


def get_node_agent_config(*, wait_seconds: float = DEFAULT_WAIT_SECONDS) -> NodeAgentConfig:
    if wait_seconds <= 0:
        raise ConfigurationError(f"Wait must be positive, got {wait_seconds}")
    values = require_env_vars(("FLEETCHECK_NODE_URLS",))
    node_urls = tuple(
        _validate_url(url.rstrip("/")) for url in split_env_list(values["FLEETCHECK_NODE_URLS"])
    )
    if not node_urls:
        raise ConfigurationError("FLEETCHECK_NODE_URLS lists no node agents")
    return NodeAgentConfig(
        node_urls=node_urls,
        resilience=ResilienceConfig(
            name="node-agent",
            timeout_seconds=wait_seconds,
            retry=NO_RETRY,
            cache=None,
        ),
    )


def _validate_url(url: str) -> str:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid node agent URL {url!r}: {exc}") from exc
    if parsed.scheme not in {"http", "https"} or not parsed.host:
        raise ConfigurationError(f"Invalid node agent URL {url!r}: expected http(s)://host[:port]")
    return url
