"""Split an arithmetic expression into typed tokens."""
import string
from typing import List, Tuple

from arithmetic_evaluator.common.errors import LexError, UnsupportedTokenError
from arithmetic_evaluator.common.tokens import Token, TokenKind


LETTERS: frozenset = frozenset(string.ascii_letters)
DIGITS: frozenset = frozenset(string.digits)
ALPHANUMERIC: frozenset = LETTERS | DIGITS
NUMBER_CHARS: frozenset = DIGITS | {"."}
BRACES: frozenset = frozenset("()")
OPERATOR_CHARS: frozenset = frozenset("+-*/")
WHITESPACE: frozenset = frozenset(" \t")


class Tokenizer:
    """
    Single left-to-right scanner with one character of lookahead.

    Every input character ends up in exactly one token, except spaces and tabs
    which are skipped. Any other character raises a LexError.

    Examples:
        - ``"2 + 3.5"`` -> NUMBER "2", OPERATOR "+", NUMBER "3.5"
        - ``"(a1*4)"`` -> BRACE "(", IDENTIFIER "a1", OPERATOR "*", NUMBER "4", BRACE ")"
    """

    def __init__(self, allow_identifiers: bool = True) -> None:
        self.allow_identifiers = allow_identifiers

    @staticmethod
    def _scan_run(expression: str, start: int, allowed: frozenset) -> int:
        """Return the index just past the maximal run of ``allowed`` characters."""
        end = start
        while end < len(expression) and expression[end] in allowed:
            end += 1
        return end

    def tokenize(self, expression: str) -> Tuple[Token, ...]:
        """
        Split an arithmetic expression into tokens, in source order.

        :param str expression: Raw expression text

        :return: Immutable sequence of tokens (empty for empty input)
        :rtype: Tuple[Token, ...]
        :raises LexError: If a character belongs to no token class
        :raises UnsupportedTokenError: If identifiers are disallowed and one is found
        """
        tokens: List[Token] = []
        cursor = 0

        while cursor < len(expression):
            current = expression[cursor]

            if current in LETTERS:
                end = self._scan_run(expression, cursor, ALPHANUMERIC)
                text = expression[cursor:end]
                if not self.allow_identifiers:
                    raise UnsupportedTokenError(text, cursor + 1)
                tokens.append(Token(kind=TokenKind.IDENTIFIER, text=text, position=cursor + 1))
                cursor = end
            elif current in DIGITS:
                # "1.2.3" is accepted here and rejected when the number is parsed
                end = self._scan_run(expression, cursor, NUMBER_CHARS)
                tokens.append(Token(kind=TokenKind.NUMBER, text=expression[cursor:end], position=cursor + 1))
                cursor = end
            elif current in BRACES:
                tokens.append(Token(kind=TokenKind.BRACE, text=current, position=cursor + 1))
                cursor += 1
            elif current in OPERATOR_CHARS:
                tokens.append(Token(kind=TokenKind.OPERATOR, text=current, position=cursor + 1))
                cursor += 1
            elif current in WHITESPACE:
                cursor += 1
            else:
                raise LexError(current, cursor + 1)

        return tuple(tokens)


def tokenize(expression: str) -> Tuple[Token, ...]:
    """Tokenize ``expression`` with identifiers allowed."""
    return Tokenizer().tokenize(expression)
