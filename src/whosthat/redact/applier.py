"""Mask plan applier.

Plan entries reference half-open character ranges ``[start, end)`` in the
original text.  Replacements are applied from right to left so earlier spans
are unaffected by later edits.  Indices are validated under the half-open
convention and the result is assembled with a chunked builder.
"""

from __future__ import annotations

from dataclasses import replace

from whosthat.utils.errors import OverlapError, SpanOutOfBoundsError

from .plan_builder import MaskEntry

__all__ = ["apply_plan"]


def _validate_and_sort(plan: list[MaskEntry], *, text_len: int) -> list[MaskEntry]:
    """Return ``plan`` sorted by ``(start, end)`` after validating spans.

    The caller's ``plan`` is not mutated.
    """

    ordered = sorted(plan, key=lambda p: (p.start, p.end))
    prev_end = 0
    for entry in ordered:
        if not (0 <= entry.start <= entry.end <= text_len):
            raise SpanOutOfBoundsError(f"plan entry out of bounds: {entry.start}-{entry.end}")
        if prev_end > entry.start:
            raise OverlapError(f"plan entries overlap: {prev_end} > {entry.start}")
        prev_end = entry.end
    return ordered


def apply_plan(text: str, plan: list[MaskEntry]) -> tuple[str, list[MaskEntry]]:
    """Apply ``plan`` to ``text``.

    Returns
    -------
    tuple[str, list[MaskEntry]]
        ``(new_text, applied_plan)``.  Each applied entry carries
        ``meta["applied_index"]`` with its 1-based application order counted
        from the start of the text.
    """

    if not plan:
        return text, []

    sorted_plan = _validate_and_sort(plan, text_len=len(text))

    last = len(text)
    parts: list[str] = []
    for entry in reversed(sorted_plan):
        parts.append(text[entry.end : last])
        parts.append(entry.replacement)
        last = entry.start
    parts.append(text[:last])
    new_text = "".join(reversed(parts))

    applied_plan: list[MaskEntry] = []
    for idx, entry in enumerate(sorted_plan, 1):
        meta = dict(entry.meta)
        meta["applied_index"] = idx
        applied_plan.append(replace(entry, meta=meta))

    removed = sum(e.end - e.start for e in sorted_plan)
    added = sum(len(e.replacement) for e in sorted_plan)
    assert len(new_text) == len(text) - removed + added
    return new_text, applied_plan
