"""Whitespace normalization of flavor text.

PokéAPI flavor texts keep the line breaks of the original game screens,
including form feeds (``\\f``).  :func:`normalize` replaces every whitespace
character with one ASCII space.  The replacement is one-for-one, so offsets in
the normalized text match offsets in the input.  The function is pure and
performs no I/O.

Example
-------

>>> normalize("Slowbro\\nis lazy.")
NormalizationResult(text='Slowbro is lazy.', changed=True)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s")


@dataclass(slots=True, frozen=True)
class NormalizationResult:
    """Result of :func:`normalize`.

    Attributes
    ----------
    text:
        The normalized text.
    changed:
        ``True`` if the normalized text differs from the input.
    """

    text: str
    changed: bool


def normalize(text: str) -> NormalizationResult:
    """Normalize ``text`` and return a :class:`NormalizationResult`."""

    normalized = _WHITESPACE.sub(" ", text)
    return NormalizationResult(normalized, normalized != text)


__all__ = ["NormalizationResult", "normalize"]
