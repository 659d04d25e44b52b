import pytest

from whosthat.redact.tokenizer import split_pieces


def test_pieces_carry_leading_separator() -> None:
    pieces = split_pieces("Slowbro is lazy.")
    assert [p.text for p in pieces] == ["Slowbro", " is", " lazy", "."]
    assert [p.word for p in pieces] == ["slowbro", "is", "lazy", ""]


def test_consecutive_separators_split_individually() -> None:
    pieces = split_pieces("Wait, what?!")
    assert [p.text for p in pieces] == ["Wait", ",", " what", "?", "!"]


def test_word_offsets_are_absolute() -> None:
    text = "It's MEW."
    pieces = split_pieces(text)
    mew = next(p for p in pieces if p.word == "mew")
    assert text[mew.word_start : mew.word_end] == "MEW"
    assert mew.has_word
    assert not pieces[-1].has_word


@pytest.mark.parametrize(
    "text",
    ["", "   ", ".leading", "trailing\n", "A\fform\nfeed", "Flabébé's\u00adsoft", "x" * 50],
)
def test_pieces_cover_text(text: str) -> None:
    pieces = split_pieces(text)
    assert "".join(p.text for p in pieces) == text
    offset = 0
    for piece in pieces:
        assert piece.start == offset
        assert piece.end == offset + len(piece.text)
        offset = piece.end
    assert offset == len(text)
