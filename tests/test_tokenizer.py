"""Test class Tokenizer."""
from pydantic import ValidationError
import pytest

from arithmetic_evaluator.common.errors import LexError, UnsupportedTokenError
from arithmetic_evaluator.common.tokenizer import Tokenizer, tokenize
from arithmetic_evaluator.common.tokens import Token, TokenKind


def kinds_and_texts(tokens):
    return [(token.kind, token.text) for token in tokens]


def test_tokenize_basic():
    """Tokenize splits a simple expression into typed tokens."""
    tokens = tokenize("3 + 4 * 2")
    assert kinds_and_texts(tokens) == [
        (TokenKind.NUMBER, "3"),
        (TokenKind.OPERATOR, "+"),
        (TokenKind.NUMBER, "4"),
        (TokenKind.OPERATOR, "*"),
        (TokenKind.NUMBER, "2"),
    ]


def test_tokenize_without_whitespace():
    """Whitespace is optional between tokens."""
    assert [token.text for token in tokenize("12.5*(3-1)/x2")] == [
        "12.5", "*", "(", "3", "-", "1", ")", "/", "x2",
    ]


def test_tokenize_records_positions():
    """Each token carries the 1-based column of its first character."""
    tokens = tokenize(" 10 +\t7")
    assert [token.position for token in tokens] == [2, 5, 7]


def test_tokenize_returns_immutable_sequence():
    """The token sequence is a tuple of frozen tokens."""
    tokens = tokenize("1+2")
    assert isinstance(tokens, tuple)
    with pytest.raises(Exception):
        tokens[0].text = "9"


@pytest.mark.parametrize("expr", ["", "   ", "\t \t"])
def test_tokenize_empty_input(expr):
    """Empty or blank input yields no tokens."""
    assert tokenize(expr) == ()


def test_number_run_accepts_multiple_dots():
    """Malformed literals are kept whole; parsing happens later."""
    assert kinds_and_texts(tokenize("1.2.3")) == [(TokenKind.NUMBER, "1.2.3")]


def test_identifier_run_includes_digits():
    """An identifier started by a letter absorbs following digits."""
    assert kinds_and_texts(tokenize("ab12c")) == [(TokenKind.IDENTIFIER, "ab12c")]


def test_digit_then_letter_splits():
    """A digit run stops at a letter, which starts an identifier."""
    assert kinds_and_texts(tokenize("2x")) == [
        (TokenKind.NUMBER, "2"),
        (TokenKind.IDENTIFIER, "x"),
    ]


def test_braces_are_tokens():
    """Each brace is its own one-character token."""
    assert kinds_and_texts(tokenize("(())")) == [(TokenKind.BRACE, c) for c in "(())"]


@pytest.mark.parametrize("expr,character,position", [
    ("2@3", "@", 2),
    ("2 @ 3", "@", 3),
    ("1 + 2 = 3", "=", 7),
    (".5", ".", 1),
    ("4\n", "\n", 2),
    ("2^3", "^", 2),
])
def test_tokenize_rejects_unknown_characters(expr, character, position):
    """Unknown characters raise LexError naming the character and column."""
    with pytest.raises(LexError) as exc_info:
        tokenize(expr)
    assert exc_info.value.character == character
    assert exc_info.value.position == position
    assert repr(character) in str(exc_info.value)


def test_tokenize_rejects_non_ascii_letters():
    """Only ASCII letters start identifiers."""
    with pytest.raises(LexError):
        tokenize("é+1")


def test_identifiers_disallowed():
    """With identifiers disallowed the first one raises UnsupportedTokenError."""
    with pytest.raises(UnsupportedTokenError) as exc_info:
        Tokenizer(allow_identifiers=False).tokenize("1 + foo2")
    assert exc_info.value.text == "foo2"
    assert exc_info.value.position == 5


def test_token_model_is_frozen():
    """Token is an immutable value."""
    token = Token(kind=TokenKind.OPERATOR, text="+", position=1)
    with pytest.raises(Exception):
        token.kind = TokenKind.BRACE
    assert token == Token(kind=TokenKind.OPERATOR, text="+", position=1)


@pytest.mark.parametrize("kind,text", [
    (TokenKind.NUMBER, "1e5"),
    (TokenKind.NUMBER, "nan"),
    (TokenKind.NUMBER, "1_0"),
    (TokenKind.NUMBER, ".5"),
    (TokenKind.OPERATOR, "^"),
    (TokenKind.OPERATOR, "++"),
    (TokenKind.BRACE, "]"),
    (TokenKind.IDENTIFIER, "9a"),
])
def test_token_text_must_match_kind(kind, text):
    """A token cannot carry text outside its kind's character class."""
    with pytest.raises(ValidationError):
        Token(kind=kind, text=text, position=1)


def test_token_position_is_required():
    """Hand-built tokens must say where they come from."""
    with pytest.raises(ValidationError):
        Token(kind=TokenKind.NUMBER, text="1")
