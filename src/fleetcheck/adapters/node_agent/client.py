"""HTTP client for the per-node fact and cartridge agents."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from fleetcheck.adapters.broker.translator import parse_cartridge_list
from fleetcheck.adapters.http_resilience import ResilientClient
from fleetcheck.config.node_agent import NodeAgentConfig, get_node_agent_config
from fleetcheck.domain.audit import DEFAULT_MAX_PARALLEL

from .schema import FactsResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from fleetcheck.config.http_resilience import ResilienceConfig
    from fleetcheck.domain.model import CartridgeRecord, FactName, NodeId
    from fleetcheck.domain.ports import FactProvider, NodeCartridgeSource

log = getLogger(__name__)

FACTS_PATH = "/facts"
CARTRIDGES_PATH = "/cartridges"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class NodeAgentError(RuntimeError):
    """Raised when a node agent answers with something other than the expected payload."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url


# an agent failing with one of these is left out of the audit
_AGENT_FAILURES = (httpx.HTTPError, httpx.InvalidURL, NodeAgentError, ValueError)


@dataclass(slots=True)
class NodeAgentClient:
    """Fact provider and cartridge source backed by one HTTP agent per node.

    Node ids are the identities the agents report; the URL that answered for each id
    is remembered so inventories can be requested from the same agent.
    """

    config: NodeAgentConfig = field(default_factory=get_node_agent_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    max_parallel: int = DEFAULT_MAX_PARALLEL
    _urls_by_node: dict[NodeId, str] = field(default_factory=dict, init=False, repr=False)

    async def get_facts(
        self,
        fact_names: Sequence[FactName],
    ) -> dict[NodeId, dict[str, str | None]]:
        params = httpx.QueryParams([("name", str(name)) for name in fact_names])
        semaphore = asyncio.Semaphore(self.max_parallel)

        async def fetch(client: ResilientClient, url: str) -> FactsResponse:
            async with semaphore:
                payload = await client.get_json(f"{url}{FACTS_PATH}", params=params)
            try:
                return FactsResponse.model_validate(payload)
            except ValidationError as exc:
                raise NodeAgentError("unexpected facts payload", url=url) from exc

        urls = self.config.node_urls
        async with self.client_factory(self.config.resilience) as client:
            results = await asyncio.gather(
                *(fetch(client, url) for url in urls),
                return_exceptions=True,
            )

        facts: dict[NodeId, dict[str, str | None]] = {}
        for url, result in zip(urls, results, strict=True):
            if isinstance(result, _AGENT_FAILURES):
                log.warning("Node agent %s did not respond: %s", url, result)
                continue
            if isinstance(result, BaseException):
                raise result
            if result.identity in facts:
                log.warning(
                    "Node agent %s reports identity %s already reported by %s; ignoring it",
                    url,
                    result.identity,
                    self._urls_by_node[result.identity],
                )
                continue
            self._urls_by_node[result.identity] = url
            facts[result.identity] = dict(result.facts)

        log.debug("%s of %s node agent(s) answered the fact request", len(facts), len(urls))
        return facts

    async def get_inventory(self, node_id: NodeId) -> list[CartridgeRecord]:
        url = self._urls_by_node.get(node_id)
        if url is None:
            raise KeyError(f"Unknown node {node_id}; request facts first")

        async with self.client_factory(self.config.resilience) as client:
            payload = await client.get_json(f"{url}{CARTRIDGES_PATH}")
        try:
            return parse_cartridge_list(payload)
        except ValidationError as exc:
            raise NodeAgentError("unexpected cartridge payload", url=url) from exc


if TYPE_CHECKING:
    _facts_check: FactProvider = NodeAgentClient()
    _inventory_check: NodeCartridgeSource = NodeAgentClient()
