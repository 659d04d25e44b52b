"""Mask plan builder.

Walks the tokenizer pieces of a flavor text and emits one :class:`MaskEntry`
for each piece whose word run is a banned name.  Only the word run is covered,
so separators and trailing punctuation survive masking.  The plan is sorted by
position and never overlaps because pieces are disjoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whosthat.utils.constants import default_mask

from .banned import BannedWordSet
from .tokenizer import split_pieces

__all__ = ["MaskEntry", "build_mask_plan"]


@dataclass(slots=True)
class MaskEntry:
    """Description of a single mask operation."""

    start: int
    end: int
    replacement: str
    word: str
    meta: dict[str, object] = field(default_factory=dict)


def build_mask_plan(
    text: str, banned: BannedWordSet, *, mask: str | None = None
) -> list[MaskEntry]:
    """Return the mask operations needed to hide every banned word in ``text``."""

    replacement = default_mask() if mask is None else mask
    plan: list[MaskEntry] = []
    for piece in split_pieces(text):
        if not piece.has_word:
            continue
        word = piece.word
        if word in banned:
            plan.append(MaskEntry(piece.word_start, piece.word_end, replacement, word))
    return plan
