from __future__ import annotations

from pathlib import Path

import pytest

from fleetcheck.config import (
    DEFAULT_WAIT_SECONDS,
    NO_RETRY,
    ConfigurationError,
    MissingConfigurationError,
    get_audit_config,
    get_broker_config,
    get_node_agent_config,
    require_env_vars,
    split_env_list,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", " value ")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_A", raising=False)
    monkeypatch.setenv("MISSING_B", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_split_env_list_drops_blank_entries() -> None:
    assert split_env_list(" a, ,b,, c ") == ("a", "b", "c")


def test_node_agent_config_uses_wait_as_timeout_without_retries(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FLEETCHECK_NODE_URLS", "http://n1:8080/, http://n2:8080")

    config = get_node_agent_config(wait_seconds=2.5)

    assert config.node_urls == ("http://n1:8080", "http://n2:8080")
    assert config.resilience.timeout_seconds == 2.5
    assert config.resilience.retry == NO_RETRY
    assert config.resilience.cache is None


def test_node_agent_config_defaults_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLEETCHECK_NODE_URLS", "http://n1:8080")

    assert get_node_agent_config().resilience.timeout_seconds == DEFAULT_WAIT_SECONDS


def test_node_agent_config_requires_some_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLEETCHECK_NODE_URLS", " , ")

    with pytest.raises(ConfigurationError):
        get_node_agent_config()


@pytest.mark.parametrize(
    "urls",
    ["http://n1:8080, http://n2:port", "http://n1:8080, n2.example.com"],
)
def test_node_agent_config_rejects_malformed_urls(
    monkeypatch: pytest.MonkeyPatch, urls: str
) -> None:
    monkeypatch.setenv("FLEETCHECK_NODE_URLS", urls)

    with pytest.raises(ConfigurationError, match="Invalid node agent URL"):
        get_node_agent_config()


def test_broker_config_adds_bearer_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLEETCHECK_BROKER_URL", "https://broker.example.com/api/")
    monkeypatch.setenv("FLEETCHECK_BROKER_TOKEN", "secret")

    config = get_broker_config()

    assert config.base_url == "https://broker.example.com/api"
    assert config.resilience.default_headers == {"Authorization": "Bearer secret"}
    assert config.resilience.cache is not None


def test_broker_config_requires_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLEETCHECK_BROKER_URL", raising=False)

    with pytest.raises(MissingConfigurationError, match="FLEETCHECK_BROKER_URL"):
        get_broker_config()


def test_audit_config_reads_parallelism_and_restrictions(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FLEETCHECK_MAX_PARALLEL", "4")
    monkeypatch.setenv("FLEETCHECK_RESTRICTIONS_FILE", "/etc/fleetcheck/restrictions.toml")

    config = get_audit_config()

    assert config.max_parallel == 4
    assert config.restrictions_file == Path("/etc/fleetcheck/restrictions.toml")


@pytest.mark.parametrize("value", ["zero", "0", "-3"])
def test_audit_config_rejects_bad_parallelism(
    monkeypatch: pytest.MonkeyPatch,
    value: str,
) -> None:
    monkeypatch.setenv("FLEETCHECK_MAX_PARALLEL", value)

    with pytest.raises(ConfigurationError, match="FLEETCHECK_MAX_PARALLEL"):
        get_audit_config()
