"""Game controller.

The controller owns the :class:`~whosthat.game.state.GameState`, runs the
corpus loader and the round generator on the event loop, and notifies
:class:`GameView` observers after every transition.  A settings change
cancels the generator run it supersedes; if that run still delivers, the
generation check in :mod:`whosthat.game.state` discards its result.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from whosthat.utils.errors import WhosThatError
from whosthat.utils.logging import get_logger

from . import state as transitions
from .entity import Entity
from .generator import RoundGenerator
from .loader import CorpusLoader
from .settings import Settings
from .state import GameState

__all__ = ["GameController", "GameView"]

log = get_logger(__name__)


@runtime_checkable
class GameView(Protocol):
    """Presentation layer observing the controller."""

    def render(self, state: GameState) -> None:
        """Draw ``state``.  Called after every state change."""

        ...


class GameController:
    def __init__(
        self,
        loader: CorpusLoader,
        generator: RoundGenerator,
        settings: Settings | None = None,
        views: Iterable[GameView] = (),
    ) -> None:
        self.loader = loader
        self.generator = generator
        self._state = transitions.initial_state(settings)
        self._views: list[GameView] = list(views)
        self._batch: asyncio.Task[tuple[Entity, ...]] | None = None

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, view: GameView) -> None:
        self._views.append(view)
        view.render(self._state)

    def _dispatch(self, new_state: GameState) -> None:
        if new_state is self._state:
            return
        self._state = new_state
        for view in self._views:
            view.render(new_state)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def start(self) -> GameState:
        """Load the corpus, then generate the first game."""

        if self._state.banned is None:
            self._dispatch(transitions.corpus_started(self._state))
            try:
                banned = await self.loader.load()
            except WhosThatError as exc:
                log.warning("corpus load failed: %s", exc)
                self._dispatch(transitions.corpus_failed(self._state, exc))
                return self._state
            self._dispatch(transitions.corpus_loaded(self._state, banned))
        return await self._run_batch()

    async def _run_batch(self) -> GameState:
        banned = self._state.banned
        if banned is None:
            return self._state
        if self._batch is not None and not self._batch.done():
            self._batch.cancel()

        self._dispatch(transitions.batch_started(self._state))
        generation = self._state.generation
        task = asyncio.ensure_future(self.generator.generate(self._state.settings, banned))
        self._batch = task
        try:
            entities = await task
        except asyncio.CancelledError:
            if generation != self._state.generation:
                log.debug("batch %d superseded", generation)
                return self._state
            raise
        except WhosThatError as exc:
            log.warning("batch %d failed: %s", generation, exc)
            self._dispatch(transitions.batch_failed(self._state, generation, exc))
            return self._state
        if generation != self._state.generation:
            log.debug("discarding stale batch %d", generation)
        self._dispatch(transitions.batch_arrived(self._state, generation, entities))
        return self._state

    async def retry(self) -> GameState:
        """Repeat whichever stage failed last."""

        if self._state.banned is None:
            return await self.start()
        return await self._run_batch()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    async def update_settings(self, settings: Settings) -> GameState:
        """Adopt ``settings`` and regenerate the game."""

        previous = self._state
        self._dispatch(transitions.settings_changed(self._state, settings))
        if self._state is previous:
            return self._state
        return await self._run_batch()

    async def set_round_count(self, round_count: int) -> GameState:
        return await self.update_settings(self._state.settings.with_round_count(round_count))

    async def set_entities_per_round(self, entities_per_round: int) -> GameState:
        return await self.update_settings(
            self._state.settings.with_entities_per_round(entities_per_round)
        )

    async def toggle_generation(self, index: int) -> GameState:
        """Toggle one generation; raises ``SettingsError`` for the last one."""

        return await self.update_settings(self._state.settings.toggle_generation(index))

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def reveal(self, entity_id: int) -> GameState:
        self._dispatch(transitions.reveal(self._state, entity_id))
        return self._state

    def reveal_all(self) -> GameState:
        self._dispatch(transitions.reveal_all(self._state))
        return self._state

    def toggle_round(self, index: int) -> GameState:
        self._dispatch(transitions.toggle_round(self._state, index))
        return self._state
