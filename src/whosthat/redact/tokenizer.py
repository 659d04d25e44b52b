"""Position-aligned tokenization of flavor text.

Text is cut immediately before every non-word character, so each piece is at
most one separator (space, newline, punctuation) followed by a run of word
characters::

    >>> [p.text for p in split_pieces("Slowbro is lazy.")]
    ['Slowbro', ' is', ' lazy', '.']

Concatenating the pieces always yields the input unchanged.  Offsets follow the
half-open convention ``[start, end)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from whosthat.utils.constants import PIECE_SPLIT_RE, WORD_RUN_RE

__all__ = ["Piece", "split_pieces"]


@dataclass(slots=True, frozen=True)
class Piece:
    """One tokenizer piece and the location of its word run.

    ``word_start``/``word_end`` are absolute offsets of the word characters in
    the piece; they are equal when the piece holds no word characters.
    """

    start: int
    end: int
    text: str
    word_start: int
    word_end: int

    @property
    def word(self) -> str:
        """The word characters of the piece, lower-cased."""

        return self.text[self.word_start - self.start : self.word_end - self.start].lower()

    @property
    def has_word(self) -> bool:
        return self.word_end > self.word_start


def split_pieces(text: str) -> list[Piece]:
    """Split ``text`` into :class:`Piece` objects covering it end to end."""

    pieces: list[Piece] = []
    offset = 0
    for chunk in PIECE_SPLIT_RE.split(text):
        if not chunk:
            continue
        match = WORD_RUN_RE.search(chunk)
        if match is None:
            word_start = word_end = offset + len(chunk)
        else:
            word_start, word_end = offset + match.start(), offset + match.end()
        pieces.append(Piece(offset, offset + len(chunk), chunk, word_start, word_end))
        offset += len(chunk)
    return pieces
