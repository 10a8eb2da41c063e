"""Load the optional cartridge-to-profile restriction mapping from TOML."""

from __future__ import annotations

import tomllib
from logging import getLogger
from typing import TYPE_CHECKING

from fleetcheck.config.errors import RestrictionsFileError

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

RESTRICTIONS_TABLE = "restrictions"


def load_restrictions(path: Path) -> dict[str, tuple[str, ...]]:
    """Read ``[restrictions]`` mapping cartridge names to the profiles allowed to offer them.

    Example::

        [restrictions]
        jenkins = ["large", "xlarge"]
    """

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise RestrictionsFileError(f"cannot read file ({exc.strerror})", path=str(path)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise RestrictionsFileError(f"invalid TOML ({exc})", path=str(path)) from exc

    table = document.get(RESTRICTIONS_TABLE)
    if not isinstance(table, dict):
        raise RestrictionsFileError(
            f"missing [{RESTRICTIONS_TABLE}] table",
            path=str(path),
        )

    restrictions: dict[str, tuple[str, ...]] = {}
    for cartridge, profiles in table.items():  # type: ignore[reportUnknownVariableType]
        if not isinstance(profiles, list) or not all(
            isinstance(profile, str) for profile in profiles  # type: ignore[reportUnknownVariableType]
        ):
            raise RestrictionsFileError(
                f"profiles for cartridge {cartridge!r} must be a list of strings",
                path=str(path),
            )
        restrictions[str(cartridge)] = tuple(profiles)  # type: ignore[reportUnknownArgumentType]

    log.debug("Loaded %s cartridge restriction(s) from %s", len(restrictions), path)
    return restrictions
