"""Hostname resolution through the system resolver."""

from __future__ import annotations

import socket
from logging import getLogger
from typing import TYPE_CHECKING

from fleetcheck.domain.network import Resolved, Unresolvable

if TYPE_CHECKING:
    from fleetcheck.domain.network import Resolution
    from fleetcheck.domain.ports import HostnameResolver

log = getLogger(__name__)


def resolve_hostname(hostname: str) -> Resolution:
    """Resolve ``hostname`` to its first address; failures become ``Unresolvable``."""

    try:
        infos = socket.getaddrinfo(hostname, None, proto=socket.IPPROTO_TCP)
    except (OSError, UnicodeError) as exc:
        log.debug("Could not resolve %s: %s", hostname, exc)
        return Unresolvable(reason=str(exc) or type(exc).__name__)
    if not infos:
        return Unresolvable(reason="no addresses returned")
    address = str(infos[0][4][0])
    log.debug("Resolved %s to %s", hostname, address)
    return Resolved(address=address)


if TYPE_CHECKING:
    _resolver_check: HostnameResolver = resolve_hostname
