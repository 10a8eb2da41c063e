from __future__ import annotations

import pytest

from fleetcheck.domain.versions import version_key


def test_version_key_pads_each_segment() -> None:
    assert version_key("1.2.10") == "00000001" "00000002" "00000010"


@pytest.mark.parametrize(
    ("lower", "higher"),
    [
        ("1.2.9", "1.2.10"),
        ("0.9.0", "1.0.0"),
        ("2.0.0", "10.0.0"),
        ("1.10.0", "1.11.0"),
        ("3.0.99", "3.1.0"),
    ],
)
def test_version_key_orders_numerically(lower: str, higher: str) -> None:
    assert version_key(lower) < version_key(higher)


def test_version_key_is_reflexive_and_transitive() -> None:
    keys = [version_key(v) for v in ("1.0.1", "1.0.10", "1.1.0")]

    assert version_key("1.0.1") == version_key("1.0.1")
    assert keys[0] < keys[1] < keys[2]
    assert keys[0] < keys[2]


def test_version_key_treats_leading_zeros_numerically() -> None:
    assert version_key("1.02") == version_key("1.2")


def test_shorter_version_sorts_before_its_extension() -> None:
    assert version_key("1.2") < version_key("1.2.0")
    assert version_key("1.2.0").startswith(version_key("1.2"))


def test_non_numeric_segments_are_left_unpadded() -> None:
    assert version_key("1.beta") == "00000001beta"


def test_segments_wider_than_padding_overflow() -> None:
    assert len(version_key("123456789")) == 9


@pytest.mark.parametrize("segment", ["²", "٣", "1²"])
def test_non_ascii_digits_are_left_unpadded(segment: str) -> None:
    assert version_key(f"1.{segment}") == f"00000001{segment}"
