"""Errors that abort an audit run."""

from __future__ import annotations


class AuditAbortedError(RuntimeError):
    """Raised when the audit cannot produce meaningful findings."""


class NoNodesRespondedError(AuditAbortedError):
    """Raised when no node answered the fact request."""

    def __init__(self, message: str = "No nodes responded to the fact request") -> None:
        super().__init__(message)
