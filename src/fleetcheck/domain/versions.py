"""Ordering keys for dotted version strings."""

from __future__ import annotations

VERSION_SEGMENT_WIDTH = 8


def version_key(version: str) -> str:
    """Return a string key whose lexicographic order follows the numeric version order.

    Each dot-separated segment is left-padded with zeros to ``VERSION_SEGMENT_WIDTH``
    digits and the padded segments are concatenated. Segments longer than the width
    overflow and break the ordering. Non-numeric segments are passed through unpadded,
    so only dotted-numeric versions order correctly.
    """

    return "".join(_pad_segment(segment) for segment in version.split("."))


def _pad_segment(segment: str) -> str:
    if segment.isascii() and segment.isdigit():
        return f"{int(segment):0{VERSION_SEGMENT_WIDTH}d}"
    return segment


__all__ = ["VERSION_SEGMENT_WIDTH", "version_key"]
