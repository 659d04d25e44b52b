import pytest

from whosthat.redact import BannedWordSet, redact, redact_flavor


@pytest.fixture
def banned() -> BannedWordSet:
    return BannedWordSet(["slowbro", "slowpoke", "mew", "pikachu", "flabébé", "porygon2", "ho-oh"])


def test_example_from_pokedex(banned: BannedWordSet) -> None:
    assert redact_flavor("Slowbro is lazy.", banned) == "____ is lazy."


@pytest.mark.parametrize(
    "text,expected",
    [
        ("It evolves into SLOWBRO.", "It evolves into ____."),
        ("Slowpoke's tail", "____'s tail"),
        ("(Mew)", "(____)"),
        ("Pikachu, Mew and Slowbro!", "____, ____ and ____!"),
        ("Porygon2 was upgraded.", "____ was upgraded."),
        ("Flabébé sways.", "____ sways."),
    ],
)
def test_masks_names_and_keeps_punctuation(
    banned: BannedWordSet, text: str, expected: str
) -> None:
    assert redact_flavor(text, banned) == expected


def test_partial_words_untouched(banned: BannedWordSet) -> None:
    text = "Slowbros and Mewtwo like pikachus."
    assert redact_flavor(text, banned) == text


def test_whitespace_normalized_one_for_one(banned: BannedWordSet) -> None:
    text = "Slowbro\nis\flazy.\n\nVery."
    assert redact_flavor(text, banned) == "____ is lazy.  Very."


def test_redaction_is_idempotent(banned: BannedWordSet) -> None:
    once = redact_flavor("A Mew met Pikachu\nnear Slowpoke.", banned)
    assert redact_flavor(once, banned) == once


def test_mask_length_is_fixed(banned: BannedWordSet) -> None:
    text = "Mew and Slowpoke."
    result = redact(text, banned)
    assert result.text == "____ and ____."
    assert result.masked_count == 2
    removed = sum(e.end - e.start for e in result.plan)
    assert len(result.text) == len(text) - removed + 4 * result.masked_count


def test_custom_mask(banned: BannedWordSet) -> None:
    assert redact_flavor("Mew!", banned, mask="__") == "__!"


def test_compound_names_are_not_masked_piecewise(banned: BannedWordSet) -> None:
    # "ho-oh" spans two pieces; the scanner reports it instead.
    assert redact_flavor("Ho-Oh soars.", banned) == "Ho-Oh soars."


def test_empty_inputs() -> None:
    assert redact_flavor("", BannedWordSet(["mew"])) == ""
    assert redact_flavor("Mew.", BannedWordSet()) == "Mew."
