"""Public interface for the node agent adapter."""

from __future__ import annotations

from .client import NodeAgentClient, NodeAgentError
from .schema import FactsResponse

__all__ = ["FactsResponse", "NodeAgentClient", "NodeAgentError"]
