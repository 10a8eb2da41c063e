"""Audit run defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fleetcheck.domain.audit import DEFAULT_MAX_PARALLEL

from .env import optional_env_var, positive_int_env_var


@dataclass(frozen=True, slots=True)
class AuditConfig:
    max_parallel: int = DEFAULT_MAX_PARALLEL
    restrictions_file: Path | None = None


def get_audit_config() -> AuditConfig:
    restrictions = optional_env_var("FLEETCHECK_RESTRICTIONS_FILE")
    return AuditConfig(
        max_parallel=positive_int_env_var("FLEETCHECK_MAX_PARALLEL", default=DEFAULT_MAX_PARALLEL),
        restrictions_file=Path(restrictions).expanduser() if restrictions else None,
    )
