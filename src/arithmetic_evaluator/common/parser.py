"""Parse and evaluate arithmetic expressions safely."""
from typing import Tuple

from arithmetic_evaluator.common.evaluator import Evaluator
from arithmetic_evaluator.common.tokenizer import Tokenizer
from arithmetic_evaluator.common.tokens import Token


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Safe, deterministic computation
        - No state shared between two calls

    Algorithm:
        1. Tokenize character by character (identifiers rejected)
        2. Reduce the tokens with a value stack and an operator stack

    Examples:
        - ``2 + 3 * 4`` -> 14.0
        - ``8 - 4 - 2`` -> 2.0 (left-associative)
    """

    @staticmethod
    def tokenize(expr: str) -> Tuple[Token, ...]:
        """
        Split an arithmetic expression into tokens.

        Whitespace between tokens is optional (e.g. "3+4*2" or "3 + 4 * 2").

        :param str expr: Arithmetic expression as a string

        :return: Tuple of tokens
        :rtype: Tuple[Token, ...]
        :raises LexError: If an unknown character is found
        :raises UnsupportedTokenError: If the expression contains an identifier
        """
        return Tokenizer(allow_identifiers=False).tokenize(expr)

    @staticmethod
    def evaluate(expr: str, legacy_braces: bool = False) -> float:
        """
        Evaluate an arithmetic expression safely.

        :param str expr: Arithmetic expression string
        :param bool legacy_braces: Ignore parentheses instead of grouping with them

        :return: Computed result as float
        :rtype: float
        :raises EvaluationError: If expression is invalid or malformed
        """
        tokens = ExpressionParser.tokenize(expr)
        return Evaluator(legacy_braces=legacy_braces).evaluate(tokens)


def evaluate_expression(expression: str, *, legacy_braces: bool = False) -> float:
    """Evaluate one expression, raising an EvaluationError subclass on failure."""
    return ExpressionParser.evaluate(expression, legacy_braces=legacy_braces)
