"""Matching policies used by the resolution pipeline.

Kept separate from the markup traversal so each rule can be swapped or
tested on its own.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from cinebyarr.domain.entities.stremio import DEFAULT_LANGUAGE

T = TypeVar("T")


def first_match(candidates: Sequence[T]) -> T | None:
    """Pick the first candidate in document order, no ranking."""
    return candidates[0] if candidates else None


def loose_equals(left: str | int | None, right: str | int | None) -> bool:
    """Compare season/episode numbers that may be str or int.

    Two sides that are both plain digit strings (or ints) compare as
    integers, so ``"1"``, ``"01"`` and ``1`` all match, including two
    strings such as ``"01"`` and ``"1"``. Anything else compares by its
    stripped string form, so ``"1.0"`` does not match ``1``.
    """
    if left is None or right is None:
        return left is right
    left_s, right_s = str(left).strip(), str(right).strip()
    if left_s.isdigit() and right_s.isdigit():
        return int(left_s) == int(right_s)
    return left_s == right_s


def subtitle_language(srclang: str | None) -> str:
    """Language tag for a subtitle track, ``"en"`` when unspecified."""
    return srclang or DEFAULT_LANGUAGE


def qualify_url(href: str, origin: str) -> str:
    """Qualify a relative link against the site origin.

    Links starting with ``http`` pass through unchanged.
    """
    if href.startswith("http"):
        return href
    return f"{origin.rstrip('/')}{href if href.startswith('/') else '/' + href}"
