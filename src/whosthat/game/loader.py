"""Corpus loader: the one-time fetch of every known creature name."""

from __future__ import annotations

import asyncio

from whosthat.api.base import PokeApi
from whosthat.api.records import parse_resource_list
from whosthat.redact.banned import BannedWordSet
from whosthat.utils.logging import get_logger

__all__ = ["CorpusLoader"]

log = get_logger(__name__)


class CorpusLoader:
    """Fetch the banned-word dictionary once per session.

    Concurrent callers share a single in-flight request.  A failed fetch is
    not cached, so calling :meth:`load` again retries it.
    """

    def __init__(self, api: PokeApi) -> None:
        self._api = api
        self._task: asyncio.Task[BannedWordSet] | None = None
        self._banned: BannedWordSet | None = None

    @property
    def loaded(self) -> bool:
        return self._banned is not None

    async def load(self) -> BannedWordSet:
        if self._banned is not None:
            return self._banned
        if self._task is None:
            self._task = asyncio.ensure_future(self._fetch())
        task = self._task
        try:
            self._banned = await asyncio.shield(task)
        except BaseException:
            if task.done() and (task.cancelled() or task.exception() is not None):
                self._task = None
            raise
        return self._banned

    async def _fetch(self) -> BannedWordSet:
        listing = parse_resource_list(await self._api.list_pokemon())
        banned = BannedWordSet(item.name for item in listing.results)
        log.info("loaded %d creature names", len(banned))
        return banned
