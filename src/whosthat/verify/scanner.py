"""Residual spoiler scanner.

Masking works piece by piece, so a name made of several words, such as
``mr-mime`` written "Mr. Mime" or ``ho-oh`` written "Ho-Oh", passes through
untouched.  The scanner re-reads redacted text and reports every banned name
that is still visible, whether single- or multi-word.  It never modifies text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache

from whosthat.redact.banned import BannedWordSet
from whosthat.redact.tokenizer import split_pieces
from whosthat.utils.constants import NON_WORD_RE

__all__ = ["ResidualFinding", "VerificationReport", "scan_text"]


@dataclass(frozen=True, slots=True)
class ResidualFinding:
    """A banned name still visible in redacted text."""

    start: int
    end: int
    text: str
    name: str


@dataclass(frozen=True, slots=True)
class VerificationReport:
    findings: list[ResidualFinding] = field(default_factory=list)

    @property
    def residual_count(self) -> int:
        return len(self.findings)

    @property
    def names(self) -> list[str]:
        return sorted({f.name for f in self.findings})


@lru_cache(maxsize=8)
def _compound_patterns(banned: BannedWordSet) -> tuple[tuple[str, re.Pattern[str]], ...]:
    patterns: list[tuple[str, re.Pattern[str]]] = []
    for name in sorted(banned.compound_names()):
        parts = [p for p in NON_WORD_RE.split(name) if p]
        if len(parts) < 2:
            continue
        body = r"\W*".join(re.escape(p) for p in parts)
        patterns.append((name, re.compile(rf"(?<!\w){body}(?!\w)", re.IGNORECASE)))
    return tuple(patterns)


def scan_text(text: str, banned: BannedWordSet) -> VerificationReport:
    """Return every banned name still visible in ``text``.

    Findings are ordered by position; a multi-word match hides single-word
    findings inside it.
    """

    findings: list[ResidualFinding] = []
    for name, pattern in _compound_patterns(banned):
        for match in pattern.finditer(text):
            findings.append(ResidualFinding(match.start(), match.end(), match.group(0), name))

    covered = [(f.start, f.end) for f in findings]
    for piece in split_pieces(text):
        if not piece.has_word or piece.word not in banned:
            continue
        if any(s <= piece.word_start and piece.word_end <= e for s, e in covered):
            continue
        findings.append(
            ResidualFinding(
                piece.word_start, piece.word_end, text[piece.word_start : piece.word_end], piece.word
            )
        )

    findings.sort(key=lambda f: (f.start, f.end))
    return VerificationReport(findings)
