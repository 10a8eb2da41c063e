from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from fleetcheck.adapters.node_agent import NodeAgentClient, NodeAgentError
from fleetcheck.config.http_resilience import NO_RETRY, ResilienceConfig
from fleetcheck.config.node_agent import NodeAgentConfig
from fleetcheck.domain.audit import REQUESTED_FACTS
from fleetcheck.domain.model import CartridgeRecord
from fleetcheck.domain.ports import FactProvider, NodeCartridgeSource
from tests.helpers.http import make_client_factory


def _config(*urls: str) -> NodeAgentConfig:
    return NodeAgentConfig(
        node_urls=urls,
        resilience=ResilienceConfig(name="node-agent", timeout_seconds=5.0, retry=NO_RETRY),
    )


def _facts_payload(identity: str) -> dict[str, object]:
    return {
        "identity": identity,
        "facts": {
            "profile": "small",
            "public_hostname": f"{identity}.example.com",
            "public_ip": "10.0.0.1",
        },
    }


def test_get_facts_requests_named_facts_and_skips_silent_nodes(
    caplog: pytest.LogCaptureFixture,
) -> None:
    requested: list[list[str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.params.get_list("name"))
        host = request.url.host
        if host == "n1":
            return httpx.Response(200, json=_facts_payload("node1"))
        if host == "n2":
            raise httpx.ConnectTimeout("timed out", request=request)
        return httpx.Response(200, json={"facts": {}})

    client = NodeAgentClient(
        config=_config("http://n1:8080", "http://n2:8080", "http://n3:8080"),
        client_factory=make_client_factory(handler),
    )

    with caplog.at_level(logging.WARNING):
        facts = asyncio.run(client.get_facts(REQUESTED_FACTS))

    assert facts == {
        "node1": {
            "profile": "small",
            "public_hostname": "node1.example.com",
            "public_ip": "10.0.0.1",
        }
    }
    assert requested[0] == ["profile", "public_hostname", "public_ip"]
    assert "http://n2:8080" in caplog.text
    assert "http://n3:8080" in caplog.text


def test_get_facts_ignores_duplicate_identities() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_facts_payload("node1"))

    client = NodeAgentClient(
        config=_config("http://n1:8080", "http://n2:8080"),
        client_factory=make_client_factory(handler),
    )

    facts = asyncio.run(client.get_facts(REQUESTED_FACTS))

    assert list(facts) == ["node1"]


def test_get_inventory_uses_the_agent_that_reported_the_node() -> None:
    hosts: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        hosts.append(request.url.host)
        if request.url.path == "/facts":
            identity = "node1" if request.url.host == "n1" else "node2"
            return httpx.Response(200, json=_facts_payload(identity))
        return httpx.Response(
            200,
            json={"cartridges": [{"name": "web", "vendor": "redhat", "version": "2.0.0"}]},
        )

    client = NodeAgentClient(
        config=_config("http://n1:8080", "http://n2:8080"),
        client_factory=make_client_factory(handler),
    )

    async def scenario() -> list[CartridgeRecord]:
        await client.get_facts(REQUESTED_FACTS)
        hosts.clear()
        return await client.get_inventory("node2")

    records = asyncio.run(scenario())

    assert records == [CartridgeRecord(name="web", vendor="redhat", version="2.0.0")]
    assert hosts == ["n2"]


def test_get_inventory_rejects_unexpected_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/facts":
            return httpx.Response(200, json=_facts_payload("node1"))
        return httpx.Response(200, json=["web"])

    client = NodeAgentClient(
        config=_config("http://n1:8080"),
        client_factory=make_client_factory(handler),
    )

    async def scenario() -> list[CartridgeRecord]:
        await client.get_facts(REQUESTED_FACTS)
        return await client.get_inventory("node1")

    with pytest.raises(NodeAgentError):
        asyncio.run(scenario())


def test_get_inventory_for_unknown_node_raises() -> None:
    client = NodeAgentClient(
        config=_config("http://n1:8080"),
        client_factory=make_client_factory(lambda _request: httpx.Response(404)),
    )

    with pytest.raises(KeyError):
        asyncio.run(client.get_inventory("ghost"))


def test_get_facts_skips_agent_with_malformed_url(caplog: pytest.LogCaptureFixture) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_facts_payload("node1"))

    client = NodeAgentClient(
        config=_config("http://n1:8080", "http://n2:port"),
        client_factory=make_client_factory(handler),
    )

    with caplog.at_level(logging.WARNING):
        facts = asyncio.run(client.get_facts(REQUESTED_FACTS))

    assert list(facts) == ["node1"]
    assert "http://n2:port" in caplog.text


def test_node_agent_client_satisfies_fetching_ports() -> None:
    client = NodeAgentClient(config=_config("http://n1:8080"))

    assert isinstance(client, FactProvider)
    assert isinstance(client, NodeCartridgeSource)
