"""The dictionary of spoiler words.

Names are lower-cased on ingestion.  The set is read-only once built.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from whosthat.utils.constants import NON_WORD_RE


class BannedWordSet:
    """Immutable, case-insensitive set of creature names."""

    __slots__ = ("_words",)

    def __init__(self, names: Iterable[str] = ()) -> None:
        words = {name.strip().lower() for name in names}
        words.discard("")
        self._words: frozenset[str] = frozenset(words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BannedWordSet):
            return self._words == other._words
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"BannedWordSet({len(self._words)} words)"

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def compound_names(self) -> frozenset[str]:
        """Names containing a separator, such as ``"mr-mime"`` or ``"ho-oh"``."""

        return frozenset(w for w in self._words if NON_WORD_RE.search(w))


__all__ = ["BannedWordSet"]
