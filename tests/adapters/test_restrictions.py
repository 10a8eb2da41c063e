from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from fleetcheck.adapters.restrictions import load_restrictions
from fleetcheck.config import RestrictionsFileError

if TYPE_CHECKING:
    from pathlib import Path


def test_load_restrictions_reads_table(tmp_path: Path) -> None:
    path = tmp_path / "restrictions.toml"
    path.write_text('[restrictions]\njenkins = ["large", "xlarge"]\nphp = []\n')

    assert load_restrictions(path) == {"jenkins": ("large", "xlarge"), "php": ()}


def test_missing_table_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "restrictions.toml"
    path.write_text('jenkins = ["large"]\n')

    with pytest.raises(RestrictionsFileError, match=r"\[restrictions\]"):
        load_restrictions(path)


def test_non_list_profiles_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "restrictions.toml"
    path.write_text('[restrictions]\njenkins = "large"\n')

    with pytest.raises(RestrictionsFileError, match="jenkins"):
        load_restrictions(path)


def test_invalid_toml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "restrictions.toml"
    path.write_text("[restrictions\n")

    with pytest.raises(RestrictionsFileError, match="invalid TOML"):
        load_restrictions(path)


def test_unreadable_file_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(RestrictionsFileError, match="cannot read"):
        load_restrictions(tmp_path / "missing.toml")
