"""Shared patterns and defaults for tokenizing and masking flavor text."""

from __future__ import annotations

import re

__all__ = [
    "DEFAULT_MASK_CHAR",
    "DEFAULT_MASK_LENGTH",
    "PIECE_SPLIT_RE",
    "NON_WORD_RE",
    "WORD_RUN_RE",
    "default_mask",
]

DEFAULT_MASK_CHAR: str = "_"
DEFAULT_MASK_LENGTH: int = 4

# Zero-width split point before every non-word character.
PIECE_SPLIT_RE: re.Pattern[str] = re.compile(r"(?=\W)")
NON_WORD_RE: re.Pattern[str] = re.compile(r"\W+")
WORD_RUN_RE: re.Pattern[str] = re.compile(r"\w+")


def default_mask() -> str:
    """Return the mask used when no configuration is supplied."""

    return DEFAULT_MASK_CHAR * DEFAULT_MASK_LENGTH
