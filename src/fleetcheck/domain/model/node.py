"""Per-node facts gathered once per run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import FactName

if TYPE_CHECKING:
    from collections.abc import Mapping

type NodeId = str
type ProfileName = str


@dataclass(frozen=True, slots=True, kw_only=True)
class NodeFacts:
    """Facts one node reported about itself."""

    node_id: NodeId
    profile: ProfileName | None = None
    public_hostname: str | None = None
    public_ip: str | None = None

    @classmethod
    def from_mapping(cls, node_id: NodeId, facts: Mapping[str, str | None]) -> NodeFacts:
        return cls(
            node_id=node_id,
            profile=_blank_to_none(facts.get(FactName.PROFILE)),
            public_hostname=_blank_to_none(facts.get(FactName.PUBLIC_HOSTNAME)),
            public_ip=_blank_to_none(facts.get(FactName.PUBLIC_IP)),
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


__all__ = ["NodeFacts", "NodeId", "ProfileName"]
