"""Shared logging helpers for fleetcheck."""

from __future__ import annotations

import logging


def configure_logging(
    *,
    verbose: bool = False,
    level: int | None = None,
    force: bool = False,
) -> None:
    """Initialise the root logger once.

    The CLI keeps stdout for the report, so the default level is WARNING and
    ``verbose`` switches to DEBUG. An explicit ``level`` wins over both. Pass
    ``force=True`` to reconfigure during tests.
    """

    if level is None:
        level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # httpx logs one INFO line per request
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
