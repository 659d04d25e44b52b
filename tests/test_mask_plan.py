from __future__ import annotations

import pytest

from whosthat.redact.applier import apply_plan
from whosthat.redact.banned import BannedWordSet
from whosthat.redact.plan_builder import MaskEntry, build_mask_plan
from whosthat.utils.errors import OverlapError, SpanOutOfBoundsError


def test_plan_covers_only_word_runs() -> None:
    text = "Call Mew, not Mewtwo."
    plan = build_mask_plan(text, BannedWordSet(["mew"]))
    assert len(plan) == 1
    entry = plan[0]
    assert text[entry.start : entry.end] == "Mew"
    assert entry.word == "mew"
    assert entry.replacement == "____"


def test_apply_plan_right_to_left() -> None:
    text = "ab cd ef"
    plan = [MaskEntry(6, 8, "XXXX", "ef"), MaskEntry(0, 2, "Y", "ab")]
    new_text, applied = apply_plan(text, plan)
    assert new_text == "Y cd XXXX"
    assert [e.meta["applied_index"] for e in applied] == [1, 2]
    assert [e.start for e in applied] == [0, 6]
    # caller's entries untouched
    assert plan[0].meta == {}


def test_empty_plan() -> None:
    assert apply_plan("abc", []) == ("abc", [])


def test_overlap_rejected() -> None:
    with pytest.raises(OverlapError):
        apply_plan("abcdef", [MaskEntry(0, 3, "_", "abc"), MaskEntry(2, 4, "_", "cd")])


@pytest.mark.parametrize("start,end", [(-1, 2), (2, 1), (0, 99)])
def test_out_of_bounds_rejected(start: int, end: int) -> None:
    with pytest.raises(SpanOutOfBoundsError):
        apply_plan("abc", [MaskEntry(start, end, "_", "x")])
