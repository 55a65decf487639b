import pytest

from yangfmt.diagnostics import (
    InvalidConcatenationError,
    UnexpectedCharacterError,
    UnexpectedTokenError,
    UnterminatedStringError,
    has_errors,
)
from yangfmt.text import TextPosition, TextRange, utf8_length


def test_error_to_diagnostic() -> None:
    diagnostic = UnterminatedStringError(4).to_diagnostic()
    assert diagnostic.code == "LEXER_UNTERMINATED_STRING"
    assert diagnostic.message == "String starting at 4 was never terminated"
    assert diagnostic.range == TextRange.empty(4)
    assert diagnostic.severity == "error"
    assert has_errors([diagnostic])
    assert not has_errors([])


def test_error_codes_and_messages() -> None:
    assert InvalidConcatenationError(3).code == "PARSER_INVALID_CONCATENATION"
    error = UnexpectedTokenError(7, ";", "expected a statement keyword")
    assert error.position == 7
    assert str(error) == "Unexpected token ';', expected a statement keyword"
    assert UnexpectedCharacterError(0, "\r").char == "\r"


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (0, TextPosition(1, 1)),
        (3, TextPosition(1, 4)),
        (4, TextPosition(2, 1)),
        (6, TextPosition(2, 3)),
        (9, TextPosition(3, 1)),
    ],
)
def test_text_position_from_offset(offset: int, expected: TextPosition) -> None:
    assert TextPosition.from_offset("abc\nde;\r\nx", offset) == expected


def test_text_position_display() -> None:
    assert str(TextPosition(2, 7)) == "line 2 col 7"


def test_text_position_columns_count_bytes() -> None:
    assert TextPosition.from_offset("é x", 3) == TextPosition(1, 4)
    assert TextPosition.from_offset("é\nab", 4) == TextPosition(2, 2)
    assert TextPosition.from_offset("é x".encode("utf-8"), 3) == TextPosition(1, 4)


def test_text_range() -> None:
    text_range = TextRange(2, 5)
    assert text_range.len() == 3
    assert TextRange.empty(1) == TextRange(1, 1)
    assert TextRange.empty(1).len() == 0
    assert utf8_length("blåbær") == 8
    with pytest.raises(ValueError):
        TextRange(3, 2)
