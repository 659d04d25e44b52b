"""aiohttp implementation of :class:`~whosthat.api.base.PokeApi`.

One :class:`aiohttp.ClientSession` is shared by every request issued through
the client so that concurrent fetches reuse connections.  Use the client as
an async context manager, or pass an existing session which the caller then
owns::

    async with AiohttpPokeApi.from_config(cfg.api) as api:
        names = await api.list_pokemon()

Network errors, timeouts, non-2xx answers and undecodable bodies all surface
as :class:`~whosthat.utils.errors.FetchFailedError`.  Server errors (5xx) and
transport failures are retried up to ``max_attempts`` times; client errors
(4xx) are not.
"""

from __future__ import annotations

import asyncio
from types import TracebackType
from typing import Any

import aiohttp

from whosthat.config.schema import ApiSettings
from whosthat.utils.errors import FetchFailedError
from whosthat.utils.logging import get_logger

__all__ = ["AiohttpPokeApi", "DEFAULT_BASE_URL"]

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"

log = get_logger(__name__)


class AiohttpPokeApi:
    """Async PokéAPI v2 client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout_s: float = 15.0,
        max_attempts: int = 2,
        user_agent: str = "whosthat/0.1",
        list_limit: int = 100000,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_s)
        self.max_attempts = max(1, max_attempts)
        self.user_agent = user_agent
        self.list_limit = list_limit
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_config(
        cls, settings: ApiSettings, *, session: aiohttp.ClientSession | None = None
    ) -> "AiohttpPokeApi":
        return cls(
            settings.base_url,
            timeout_s=settings.timeout_s,
            max_attempts=settings.max_attempts,
            user_agent=settings.user_agent,
            list_limit=settings.list_limit,
            session=session,
        )

    async def __aenter__(self) -> "AiohttpPokeApi":
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers={"User-Agent": self.user_agent}
            )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    # ------------------------------------------------------------------
    # PokeApi protocol
    # ------------------------------------------------------------------

    async def list_pokemon(self) -> Any:
        return await self._get_json("/pokemon", params={"limit": self.list_limit, "offset": 0})

    async def get_species(self, entity_id: int) -> Any:
        return await self._get_json(f"/pokemon-species/{int(entity_id)}")

    async def get_pokemon(self, entity_id: int) -> Any:
        return await self._get_json(f"/pokemon/{int(entity_id)}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        if self._session is None:
            raise RuntimeError("client session is not open; use 'async with'")
        url = f"{self.base_url}{path}"
        last_error: FetchFailedError | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                async with self._session.get(url, params=params, timeout=self.timeout) as resp:
                    if resp.status >= 500:
                        last_error = FetchFailedError(url, "server error", status=resp.status)
                    elif resp.status >= 400:
                        raise FetchFailedError(url, "request rejected", status=resp.status)
                    else:
                        try:
                            return await resp.json(content_type=None)
                        except ValueError as exc:
                            raise FetchFailedError(
                                url, "response body is not JSON", status=resp.status
                            ) from exc
            except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
                last_error = FetchFailedError(url, f"{type(exc).__name__}: {exc}")
                last_error.__cause__ = exc
            log.debug("attempt %d/%d for %s failed: %s", attempt, self.max_attempts, url, last_error)
        assert last_error is not None
        raise last_error
