"""Application configuration helpers."""

from __future__ import annotations

from .audit import AuditConfig, get_audit_config
from .broker import BrokerConfig, get_broker_config
from .env import optional_env_var, require_env_vars, split_env_list
from .errors import ConfigurationError, MissingConfigurationError, RestrictionsFileError
from .http_resilience import NO_RETRY, CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .node_agent import DEFAULT_WAIT_SECONDS, NodeAgentConfig, get_node_agent_config

__all__ = [
    "DEFAULT_WAIT_SECONDS",
    "NO_RETRY",
    "AuditConfig",
    "BrokerConfig",
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "NodeAgentConfig",
    "RateLimit",
    "ResilienceConfig",
    "RestrictionsFileError",
    "RetryPolicy",
    "configure_logging",
    "get_audit_config",
    "get_broker_config",
    "get_node_agent_config",
    "optional_env_var",
    "require_env_vars",
    "split_env_list",
]
