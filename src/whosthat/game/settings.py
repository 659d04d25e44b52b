"""User-adjustable game settings.

:class:`Settings` is immutable; every transition returns a new instance and
validates it on construction so an invalid combination can never be observed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from whosthat.utils.errors import SettingsError

from .generations import GENERATIONS

__all__ = [
    "MAX_ROUNDS",
    "MAX_PER_ROUND",
    "DEFAULT_ROUNDS",
    "DEFAULT_PER_ROUND",
    "Settings",
]

MAX_ROUNDS = 10
MAX_PER_ROUND = 6
DEFAULT_ROUNDS = 6
DEFAULT_PER_ROUND = 3


@dataclass(slots=True, frozen=True)
class Settings:
    """Round layout and the generations creatures are drawn from."""

    round_count: int = DEFAULT_ROUNDS
    entities_per_round: int = DEFAULT_PER_ROUND
    included_generations: frozenset[int] = frozenset(range(len(GENERATIONS)))

    def __post_init__(self) -> None:
        if not 1 <= self.round_count <= MAX_ROUNDS:
            raise SettingsError(f"round_count must be within [1, {MAX_ROUNDS}]")
        if not 1 <= self.entities_per_round <= MAX_PER_ROUND:
            raise SettingsError(f"entities_per_round must be within [1, {MAX_PER_ROUND}]")
        if not self.included_generations:
            raise SettingsError("at least one generation must be included")
        unknown = [i for i in self.included_generations if not 0 <= i < len(GENERATIONS)]
        if unknown:
            raise SettingsError(f"unknown generation indices: {sorted(unknown)}")

    @classmethod
    def create(
        cls,
        round_count: int = DEFAULT_ROUNDS,
        entities_per_round: int = DEFAULT_PER_ROUND,
        generations: Iterable[int] | None = None,
    ) -> "Settings":
        gens = frozenset(range(len(GENERATIONS))) if generations is None else frozenset(generations)
        return cls(round_count, entities_per_round, gens)

    @property
    def total(self) -> int:
        """Number of creatures a game with these settings holds."""

        return self.round_count * self.entities_per_round

    @property
    def sorted_generations(self) -> tuple[int, ...]:
        return tuple(sorted(self.included_generations))

    def with_round_count(self, round_count: int) -> "Settings":
        return replace(self, round_count=round_count)

    def with_entities_per_round(self, entities_per_round: int) -> "Settings":
        return replace(self, entities_per_round=entities_per_round)

    def can_toggle(self, index: int) -> bool:
        """Return ``False`` when ``index`` is the last included generation."""

        return not (self.included_generations == {index})

    def toggle_generation(self, index: int) -> "Settings":
        """Include or exclude generation ``index``.

        Removing the only remaining generation raises :class:`SettingsError`.
        """

        if index in self.included_generations:
            if not self.can_toggle(index):
                raise SettingsError("cannot exclude the only included generation")
            return replace(self, included_generations=self.included_generations - {index})
        return replace(self, included_generations=self.included_generations | {index})
