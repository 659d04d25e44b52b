from __future__ import annotations

import asyncio
import random
from typing import Any

import pytest

from fakes import FakePokeApi
from whosthat.config import load_config
from whosthat.game.generator import RoundGenerator, sample_ids
from whosthat.game.settings import Settings
from whosthat.redact.banned import BannedWordSet
from whosthat.utils.errors import FetchFailedError, MalformedRecordError


def _banned(api: FakePokeApi) -> BannedWordSet:
    return BannedWordSet(api.names)


def test_generate_builds_hidden_redacted_entities(fake_api: FakePokeApi) -> None:
    settings = Settings.create(2, 3, [0])
    gen = RoundGenerator(fake_api, rng=random.Random(5))
    entities = asyncio.run(gen.generate(settings, _banned(fake_api)))

    expected_ids = sample_ids(settings, random.Random(5))
    assert [e.id for e in entities] == expected_ids
    assert len(entities) == 6
    for e in entities:
        assert e.name == f"mon{e.id}"
        assert e.flavor_text == "____ is lazy."
        assert e.sprite_url == f"https://sprites.test/{e.id}.png"
        assert e.revealed is False


def test_both_records_fetched_per_id(fake_api: FakePokeApi) -> None:
    gen = RoundGenerator(fake_api, rng=random.Random(0))
    entities = asyncio.run(gen.generate(Settings.create(1, 4, [2]), _banned(fake_api)))
    species = sorted(arg for kind, arg in fake_api.calls if kind == "species")
    pokemon = sorted(arg for kind, arg in fake_api.calls if kind == "pokemon")
    assert species == pokemon == sorted(e.id for e in entities)


class ProbeApi(FakePokeApi):
    def __init__(self) -> None:
        super().__init__(delay=0.01)
        self.in_flight = 0
        self.peak = 0

    async def _track(self, coro: Any) -> Any:
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            return await coro
        finally:
            self.in_flight -= 1

    async def get_species(self, entity_id: int) -> Any:
        return await self._track(super().get_species(entity_id))

    async def get_pokemon(self, entity_id: int) -> Any:
        return await self._track(super().get_pokemon(entity_id))


def test_all_requests_issued_concurrently() -> None:
    api = ProbeApi()
    gen = RoundGenerator(api, rng=random.Random(0))
    asyncio.run(gen.generate(Settings.create(2, 3, [0]), _banned(api)))
    assert api.peak == 12


def test_english_entry_selected_and_missing_entry_is_empty() -> None:
    api = FakePokeApi(flavors={5: None, 6: "Mon6 glows.\fMon5 too."})  # type: ignore[dict-item]
    gen = RoundGenerator(api)
    banned = _banned(api)
    assert asyncio.run(gen.fetch_record(5)).flavor_text == ""
    record = asyncio.run(gen.fetch_record(6))
    assert gen.build_entity(record, banned).flavor_text == "____ glows. ____ too."


def test_fetch_failure_propagates() -> None:
    api = FakePokeApi(fail_ids=range(1, 152))
    gen = RoundGenerator(api, rng=random.Random(0))
    with pytest.raises(FetchFailedError):
        asyncio.run(gen.generate(Settings.create(1, 2, [0]), _banned(api)))


class BrokenApi(FakePokeApi):
    async def get_pokemon(self, entity_id: int) -> Any:
        return {"id": entity_id, "name": "broken"}


class MismatchApi(FakePokeApi):
    async def get_pokemon(self, entity_id: int) -> Any:
        payload = await super().get_pokemon(entity_id)
        payload["id"] = entity_id + 1
        return payload


@pytest.mark.parametrize("api_cls", [BrokenApi, MismatchApi])
def test_malformed_records_fail_fast(api_cls: type[FakePokeApi]) -> None:
    gen = RoundGenerator(api_cls())
    with pytest.raises(MalformedRecordError):
        asyncio.run(gen.fetch_record(3))


def test_from_config_uses_mask_and_seed(fake_api: FakePokeApi, tmp_path: Any) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("game:\n  seed: 11\nredact:\n  mask_length: 2\n")
    cfg = load_config(cfg_file, env={})
    settings = Settings.create(1, 3, [0])
    first = asyncio.run(
        RoundGenerator.from_config(fake_api, cfg).generate(settings, _banned(fake_api))
    )
    second = asyncio.run(
        RoundGenerator.from_config(fake_api, cfg).generate(settings, _banned(fake_api))
    )
    assert [e.id for e in first] == [e.id for e in second]
    assert first[0].flavor_text == "__ is lazy."


class SlowPokemonApi(FakePokeApi):
    """Species lookups fail at once while pokemon lookups hang until cancelled."""

    def __init__(self) -> None:
        super().__init__(fail_ids=range(1, 1026))
        self.settled: list[int] = []

    async def get_pokemon(self, entity_id: int) -> Any:
        try:
            await asyncio.sleep(60)
        finally:
            self.settled.append(entity_id)
        return await super().get_pokemon(entity_id)


def test_failure_waits_for_cancelled_siblings() -> None:
    api = SlowPokemonApi()
    gen = RoundGenerator(api)

    async def scenario() -> list[int]:
        with pytest.raises(FetchFailedError):
            await gen.fetch_record(5)
        return list(api.settled)

    assert asyncio.run(scenario()) == [5]
