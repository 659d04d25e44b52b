"""Round generator.

Given :class:`~whosthat.game.settings.Settings` and the banned-word set, the
generator

1. pools the ids of every included generation,
2. draws ``round_count * entities_per_round`` of them without replacement,
3. fetches the species and pokemon records of each id concurrently and merges
   them,
4. masks banned words in the flavor text, and
5. emits one hidden :class:`~whosthat.game.entity.Entity` per id, in draw
   order.

All ids and both records per id are requested at once; nothing is throttled.
If any fetch fails, the outstanding ones are cancelled and the error
propagates.
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Iterable
from typing import Literal, TypeVar

from whosthat.api.base import PokeApi
from whosthat.api.records import MergedRecord, merge_records, parse_pokemon, parse_species
from whosthat.config.schema import ConfigModel
from whosthat.redact import redact_flavor
from whosthat.redact.banned import BannedWordSet
from whosthat.utils.errors import InsufficientPopulationError
from whosthat.utils.logging import get_logger

from .entity import Entity
from .generations import eligible_ids
from .settings import Settings

__all__ = ["PopulationPolicy", "RoundGenerator", "sample_ids"]

PopulationPolicy = Literal["reject", "clamp"]
T = TypeVar("T")

log = get_logger(__name__)


def sample_ids(
    settings: Settings,
    rng: random.Random | None = None,
    *,
    policy: PopulationPolicy = "reject",
) -> list[int]:
    """Draw distinct ids from the generations included in ``settings``.

    When the pool holds fewer ids than requested, ``policy="reject"`` raises
    :class:`InsufficientPopulationError` and ``policy="clamp"`` returns the
    whole pool in random order.
    """

    pool = eligible_ids(settings.included_generations)
    total = settings.total
    if total > len(pool):
        if policy == "reject":
            raise InsufficientPopulationError(total, len(pool))
        log.warning("clamping request of %d ids to pool of %d", total, len(pool))
        total = len(pool)
    return (rng or random.Random()).sample(pool, total)


async def _gather_all(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Await ``aws`` concurrently.

    On the first failure the remaining tasks are cancelled and awaited before
    the error propagates, so none outlive the caller's session.
    """

    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class RoundGenerator:
    """Sample, fetch and redact the creatures of one game."""

    def __init__(
        self,
        api: PokeApi,
        *,
        language: str = "en",
        mask: str | None = None,
        rng: random.Random | None = None,
        population_policy: PopulationPolicy = "reject",
    ) -> None:
        self.api = api
        self.language = language
        self.mask = mask
        self.rng = rng or random.Random()
        self.population_policy = population_policy

    @classmethod
    def from_config(cls, api: PokeApi, cfg: ConfigModel) -> "RoundGenerator":
        return cls(
            api,
            language=cfg.api.language,
            mask=cfg.redact.mask,
            rng=random.Random(cfg.game.seed),
            population_policy=cfg.game.population_policy,
        )

    async def fetch_record(self, entity_id: int) -> MergedRecord:
        """Fetch both records for ``entity_id`` concurrently and merge them."""

        species, pokemon = await _gather_all(
            [self.api.get_species(entity_id), self.api.get_pokemon(entity_id)]
        )
        return merge_records(parse_species(species), parse_pokemon(pokemon), language=self.language)

    def build_entity(self, record: MergedRecord, banned: BannedWordSet) -> Entity:
        return Entity(
            id=record.id,
            name=record.name,
            flavor_text=redact_flavor(record.flavor_text, banned, mask=self.mask),
            sprite_url=record.sprite_url,
        )

    async def generate(self, settings: Settings, banned: BannedWordSet) -> tuple[Entity, ...]:
        ids = sample_ids(settings, self.rng, policy=self.population_policy)
        log.debug("sampled ids %s", ids)
        records = await _gather_all(self.fetch_record(i) for i in ids)
        return tuple(self.build_entity(record, banned) for record in records)
