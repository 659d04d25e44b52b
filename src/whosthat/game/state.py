"""Application state and its pure transitions.

:class:`GameState` is an immutable snapshot.  Every function in this module
takes a state and returns a new one (or the same object when nothing
changes); none of them perform I/O.

Each generator run is tagged with ``generation``, a counter bumped by
:func:`batch_started`.  :func:`batch_arrived` and :func:`batch_failed` drop
results whose tag is no longer current, so a slow batch for superseded
settings can never overwrite a newer one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from whosthat.redact.banned import BannedWordSet
from whosthat.utils.errors import FetchFailedError, WhosThatError

from .entity import Entity, chunk_rounds, reveal_entity
from .settings import Settings

__all__ = [
    "GameState",
    "initial_state",
    "settings_changed",
    "corpus_started",
    "corpus_loaded",
    "corpus_failed",
    "batch_started",
    "batch_arrived",
    "batch_failed",
    "reveal",
    "reveal_all",
    "toggle_round",
]


def _default_expansion(round_count: int) -> tuple[bool, ...]:
    return tuple(i == 0 for i in range(round_count))


@dataclass(slots=True, frozen=True)
class GameState:
    settings: Settings
    banned: BannedWordSet | None = None
    entities: tuple[Entity, ...] = ()
    generation: int = 0
    corpus_loading: bool = True
    game_loading: bool = True
    error: WhosThatError | None = None
    expanded_rounds: tuple[bool, ...] = ()

    @property
    def loading(self) -> bool:
        return self.corpus_loading or self.game_loading

    @property
    def rounds(self) -> list[tuple[Entity, ...]]:
        return chunk_rounds(self.entities, self.settings.entities_per_round)

    @property
    def can_retry(self) -> bool:
        """Whether the last failure was a fetch failure worth retrying."""

        return isinstance(self.error, FetchFailedError)

    def entity(self, entity_id: int) -> Entity:
        for entity in self.entities:
            if entity.id == entity_id:
                return entity
        raise KeyError(entity_id)


def initial_state(settings: Settings | None = None) -> GameState:
    settings = settings or Settings()
    return GameState(settings=settings, expanded_rounds=_default_expansion(settings.round_count))


def settings_changed(state: GameState, settings: Settings) -> GameState:
    """Adopt ``settings``; the current entities become stale."""

    if settings == state.settings:
        return state
    expanded = state.expanded_rounds
    if settings.round_count != state.settings.round_count:
        expanded = _default_expansion(settings.round_count)
    return replace(
        state,
        settings=settings,
        entities=(),
        game_loading=True,
        error=None,
        expanded_rounds=expanded,
    )


def corpus_started(state: GameState) -> GameState:
    if state.corpus_loading:
        return state
    return replace(state, corpus_loading=True, error=None)


def corpus_loaded(state: GameState, banned: BannedWordSet) -> GameState:
    return replace(state, banned=banned, corpus_loading=False, error=None)


def corpus_failed(state: GameState, error: WhosThatError) -> GameState:
    return replace(state, corpus_loading=False, error=error)


def batch_started(state: GameState) -> GameState:
    return replace(state, generation=state.generation + 1, game_loading=True, error=None)


def batch_arrived(state: GameState, generation: int, entities: tuple[Entity, ...]) -> GameState:
    if generation != state.generation:
        return state
    return replace(state, entities=tuple(entities), game_loading=False, error=None)


def batch_failed(state: GameState, generation: int, error: WhosThatError) -> GameState:
    if generation != state.generation:
        return state
    return replace(state, game_loading=False, error=error)


def reveal(state: GameState, entity_id: int) -> GameState:
    """Reveal one entity; raises ``KeyError`` for an unknown id."""

    entities = reveal_entity(state.entities, entity_id)
    if entities == state.entities:
        return state
    return replace(state, entities=entities)


def reveal_all(state: GameState) -> GameState:
    if all(e.revealed for e in state.entities):
        return state
    return replace(state, entities=tuple(e.reveal() for e in state.entities))


def toggle_round(state: GameState, index: int) -> GameState:
    """Expand or collapse round ``index``; out-of-range indices raise ``IndexError``."""

    if not 0 <= index < state.settings.round_count:
        raise IndexError(f"round index out of range: {index}")
    expanded = list(state.expanded_rounds) + [False] * (
        state.settings.round_count - len(state.expanded_rounds)
    )
    expanded[index] = not expanded[index]
    return replace(state, expanded_rounds=tuple(expanded[: state.settings.round_count]))
