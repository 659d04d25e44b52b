"""Creature cards and the one-way reveal transition."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import TypeVar

__all__ = ["Entity", "chunk_rounds", "reveal_entity"]

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Entity:
    """A creature prepared for play.

    ``flavor_text`` is already redacted.  ``revealed`` starts ``False`` and is
    the only field that ever changes, through :meth:`reveal`.
    """

    id: int
    name: str
    flavor_text: str
    sprite_url: str | None = None
    revealed: bool = False

    def reveal(self) -> "Entity":
        """Return the revealed card; revealing twice is a no-op."""

        if self.revealed:
            return self
        return replace(self, revealed=True)


def reveal_entity(entities: Sequence[Entity], entity_id: int) -> tuple[Entity, ...]:
    """Reveal the entity with ``entity_id`` leaving every other card untouched.

    Raises ``KeyError`` when no entity carries ``entity_id``.
    """

    found = False
    result: list[Entity] = []
    for entity in entities:
        if entity.id == entity_id:
            found = True
            result.append(entity.reveal())
        else:
            result.append(entity)
    if not found:
        raise KeyError(entity_id)
    return tuple(result)


def chunk_rounds(items: Sequence[T], size: int) -> list[tuple[T, ...]]:
    """Split ``items`` into consecutive rounds of ``size`` (the last may be short)."""

    if size < 1:
        raise ValueError("size must be positive")
    return [tuple(items[i : i + size]) for i in range(0, len(items), size)]
