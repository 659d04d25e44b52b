from whosthat.redact import BannedWordSet, redact_flavor
from whosthat.verify.scanner import scan_text

BANNED = BannedWordSet(["mr-mime", "ho-oh", "mew", "slowbro", "tapu-koko"])


def test_clean_text_has_no_residuals() -> None:
    report = scan_text(redact_flavor("Slowbro and Mew nap.", BANNED), BANNED)
    assert report.residual_count == 0
    assert report.names == []


def test_compound_names_found_in_common_spellings() -> None:
    text = "Mr. Mime mimes. Ho-Oh flies. TAPU KOKO zaps."
    report = scan_text(text, BANNED)
    assert report.names == ["ho-oh", "mr-mime", "tapu-koko"]
    assert [f.text for f in report.findings] == ["Mr. Mime", "Ho-Oh", "TAPU KOKO"]


def test_compound_match_requires_word_boundaries() -> None:
    assert scan_text("Mr. Mimes and Who-Oh", BANNED).residual_count == 0


def test_single_names_reported_when_unredacted() -> None:
    report = scan_text("Mew sleeps.", BANNED)
    assert report.residual_count == 1
    finding = report.findings[0]
    assert (finding.start, finding.end, finding.name) == (0, 3, "mew")


def test_findings_sorted_by_position() -> None:
    report = scan_text("Slowbro met Mr. Mime and Mew.", BANNED)
    assert [f.name for f in report.findings] == ["slowbro", "mr-mime", "mew"]
