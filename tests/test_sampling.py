import random

import pytest

from whosthat.game import generator as generator_mod
from whosthat.game.generator import sample_ids
from whosthat.game.settings import Settings
from whosthat.utils.errors import InsufficientPopulationError


@pytest.mark.parametrize("rounds,per_round", [(1, 1), (6, 3), (10, 6)])
def test_sample_size_and_uniqueness(rounds: int, per_round: int) -> None:
    settings = Settings.create(rounds, per_round, [0, 4])
    ids = sample_ids(settings, random.Random(0))
    assert len(ids) == rounds * per_round
    assert len(set(ids)) == len(ids)
    assert all(1 <= i <= 151 or 494 <= i <= 649 for i in ids)


def test_seeded_sampling_is_reproducible() -> None:
    settings = Settings.create(10, 6)
    assert sample_ids(settings, random.Random(42)) == sample_ids(settings, random.Random(42))


def test_smallest_generation_holds_largest_game() -> None:
    ids = sample_ids(Settings.create(10, 6, [5]), random.Random(1))
    assert len(ids) == 60
    assert set(ids) <= set(range(650, 722))


def test_insufficient_population_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(generator_mod, "eligible_ids", lambda gens: [1, 2, 3])
    with pytest.raises(InsufficientPopulationError) as info:
        sample_ids(Settings.create(2, 2, [0]), random.Random(0))
    assert (info.value.requested, info.value.available) == (4, 3)


def test_insufficient_population_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(generator_mod, "eligible_ids", lambda gens: [1, 2, 3])
    ids = sample_ids(Settings.create(2, 2, [0]), random.Random(0), policy="clamp")
    assert sorted(ids) == [1, 2, 3]
