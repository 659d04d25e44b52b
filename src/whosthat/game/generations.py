"""Static table of game generations and their national-dex id ranges.

Each generation covers the closed interval ``[start_id, end_id]`` where
``start_id`` is one past the previous generation's highest dex number.  The
table is immutable and indexed from ``0`` (Red and Blue) to ``8`` (Scarlet and
Violet).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "GenerationRange",
    "GENERATIONS",
    "generation_range",
    "eligible_ids",
    "parse_generation",
]

_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X")

# (short name, full name, highest dex number)
_GAMES: tuple[tuple[str, str, int], ...] = (
    ("R & B", "Red and Blue", 151),
    ("G & S", "Gold and Silver", 251),
    ("R & S", "Ruby and Sapphire", 386),
    ("D & P", "Diamond and Pearl", 493),
    ("B & W", "Black and White", 649),
    ("X & Y", "X and Y", 721),
    ("S & M", "Sun and Moon", 809),
    ("S & S", "Sword and Shield", 905),
    ("S & V", "Scarlet and Violet", 1025),
)


@dataclass(slots=True, frozen=True)
class GenerationRange:
    """One game era and the contiguous block of ids it introduced."""

    label: str
    short_name: str
    full_name: str
    start_id: int
    end_id: int
    max_dex_of_prior_range: int

    @property
    def size(self) -> int:
        return self.end_id - self.start_id + 1

    def ids(self) -> range:
        """Return the closed id interval as a :class:`range`."""

        return range(self.start_id, self.end_id + 1)


def _build_table() -> tuple[GenerationRange, ...]:
    table: list[GenerationRange] = []
    prior = 0
    for idx, (short, full, max_dex) in enumerate(_GAMES):
        table.append(
            GenerationRange(
                label=_NUMERALS[idx],
                short_name=short,
                full_name=full,
                start_id=prior + 1,
                end_id=max_dex,
                max_dex_of_prior_range=prior,
            )
        )
        prior = max_dex
    return tuple(table)


GENERATIONS: tuple[GenerationRange, ...] = _build_table()


def generation_range(index: int) -> GenerationRange:
    """Return the generation at ``index`` raising ``IndexError`` when unknown."""

    if not 0 <= index < len(GENERATIONS):
        raise IndexError(f"unknown generation index: {index}")
    return GENERATIONS[index]


def eligible_ids(indices: Iterable[int]) -> list[int]:
    """Flatten the id ranges of ``indices`` into one ascending pool.

    Duplicate indices contribute their range only once.
    """

    pool: list[int] = []
    for index in sorted(set(indices)):
        pool.extend(generation_range(index).ids())
    return pool


def parse_generation(token: str) -> int:
    """Parse ``token`` as a generation index.

    Accepts a roman numeral label (``"IV"``) or a 1-based number (``"4"``)
    and returns the 0-based index.
    """

    value = token.strip().upper()
    for idx, gen in enumerate(GENERATIONS):
        if gen.label == value:
            return idx
    if value.isdigit():
        idx = int(value) - 1
        if 0 <= idx < len(GENERATIONS):
            return idx
    raise ValueError(f"unknown generation: {token!r}")
