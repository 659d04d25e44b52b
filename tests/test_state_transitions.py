import pytest

from whosthat.game import state as st
from whosthat.game.entity import Entity
from whosthat.game.settings import Settings
from whosthat.redact.banned import BannedWordSet
from whosthat.utils.errors import FetchFailedError, MalformedRecordError


def _entities(*ids: int) -> tuple[Entity, ...]:
    return tuple(Entity(i, f"mon{i}", "____ is lazy.") for i in ids)


def _ready(settings: Settings, *ids: int) -> st.GameState:
    s = st.initial_state(settings)
    s = st.corpus_loaded(s, BannedWordSet(["mew"]))
    s = st.batch_started(s)
    return st.batch_arrived(s, s.generation, _entities(*ids))


def test_initial_state() -> None:
    s = st.initial_state(Settings.create(3, 2))
    assert s.loading is True
    assert s.entities == ()
    assert s.generation == 0
    assert s.expanded_rounds == (True, False, False)


def test_ready_state_and_rounds() -> None:
    s = _ready(Settings.create(2, 2), 79, 80, 81, 82)
    assert s.loading is False
    assert [[e.id for e in r] for r in s.rounds] == [[79, 80], [81, 82]]
    assert s.entity(81).name == "mon81"


def test_stale_batch_discarded() -> None:
    s = st.corpus_loaded(st.initial_state(), BannedWordSet(["mew"]))
    s = st.batch_started(s)
    stale = s.generation
    s = st.batch_started(s)
    assert s.generation == stale + 1
    assert st.batch_arrived(s, stale, _entities(1)) is s
    assert st.batch_failed(s, stale, FetchFailedError("u", "x")) is s
    fresh = st.batch_arrived(s, s.generation, _entities(2))
    assert [e.id for e in fresh.entities] == [2]


def test_reveal_only_flips_target() -> None:
    s = _ready(Settings.create(1, 3), 79, 80, 81)
    s2 = st.reveal(s, 80)
    assert [e.revealed for e in s2.entities] == [False, True, False]
    assert st.reveal(s2, 80) is s2
    with pytest.raises(KeyError):
        st.reveal(s2, 1)


def test_reveal_all() -> None:
    s = st.reveal_all(_ready(Settings.create(1, 2), 1, 2))
    assert all(e.revealed for e in s.entities)


def test_settings_change_marks_stale_and_resets_layout() -> None:
    s = _ready(Settings.create(2, 2), 1, 2, 3, 4)
    s = st.toggle_round(s, 1)
    assert s.expanded_rounds == (True, True)

    same_rounds = st.settings_changed(s, s.settings.with_entities_per_round(3))
    assert same_rounds.entities == ()
    assert same_rounds.game_loading is True
    assert same_rounds.expanded_rounds == (True, True)

    more_rounds = st.settings_changed(s, s.settings.with_round_count(4))
    assert more_rounds.expanded_rounds == (True, False, False, False)
    assert st.settings_changed(s, s.settings) is s


def test_toggle_round_bounds() -> None:
    s = st.initial_state(Settings.create(2, 1))
    assert st.toggle_round(s, 0).expanded_rounds == (False, False)
    with pytest.raises(IndexError):
        st.toggle_round(s, 2)


def test_errors_and_retry_flag() -> None:
    s = st.corpus_failed(st.initial_state(), FetchFailedError("u", "down"))
    assert s.corpus_loading is False
    assert s.can_retry is True
    s = st.corpus_loaded(s, BannedWordSet(["mew"]))
    assert s.error is None
    s = st.batch_started(s)
    s = st.batch_failed(s, s.generation, MalformedRecordError("bad"))
    assert s.game_loading is False
    assert s.can_retry is False


def test_corpus_restart_after_failure() -> None:
    initial = st.initial_state()
    assert st.corpus_started(initial) is initial
    failed = st.corpus_failed(initial, FetchFailedError("u", "down"))
    again = st.corpus_started(failed)
    assert again.corpus_loading is True
    assert again.error is None
