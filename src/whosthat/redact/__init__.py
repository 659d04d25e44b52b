"""Spoiler redaction of flavor text.

The pipeline is: split the text into pieces, plan a mask for every piece
whose word is a banned name, apply the plan right to left, then normalize
whitespace.  :func:`redact_flavor` runs all steps.
"""

from __future__ import annotations

from dataclasses import dataclass

from whosthat.preprocess.normalizer import normalize

from .applier import apply_plan
from .banned import BannedWordSet
from .plan_builder import MaskEntry, build_mask_plan
from .tokenizer import Piece, split_pieces


@dataclass(slots=True, frozen=True)
class RedactionResult:
    """Redacted text and the mask operations that produced it."""

    text: str
    plan: tuple[MaskEntry, ...]

    @property
    def masked_count(self) -> int:
        return len(self.plan)


def redact(text: str, banned: BannedWordSet, *, mask: str | None = None) -> RedactionResult:
    """Mask banned words in ``text`` and normalize its whitespace."""

    plan = build_mask_plan(text, banned, mask=mask)
    masked, applied = apply_plan(text, plan)
    return RedactionResult(normalize(masked).text, tuple(applied))


def redact_flavor(text: str, banned: BannedWordSet, *, mask: str | None = None) -> str:
    """Return ``text`` with banned words masked and whitespace normalized."""

    return redact(text, banned, mask=mask).text


__all__ = [
    "BannedWordSet",
    "MaskEntry",
    "Piece",
    "RedactionResult",
    "apply_plan",
    "build_mask_plan",
    "redact",
    "redact_flavor",
    "split_pieces",
]
