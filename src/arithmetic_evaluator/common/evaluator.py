"""Evaluate a token sequence with an operand stack and an operator stack."""
from collections.abc import Callable as ABCCallable
import math
import operator
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping

from arithmetic_evaluator.common.errors import (
    DivisionError,
    EvalError,
    MismatchedBraceError,
    NumberFormatError,
    UnsupportedTokenError,
)
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.tokens import Token, TokenKind


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Operator symbol -> precedence, higher binds tighter
PRECEDENCE: Mapping[str, int] = MappingProxyType({
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
})

OPERATORS: Mapping[str, OperatorFn] = MappingProxyType({
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
})

# Marks an open brace on the operator stack
OPEN_BRACE = "("
CLOSE_BRACE = ")"


class Evaluator:
    """
    Operator-precedence evaluator (stack-machine reduction).

    Algorithm:
        1. Numbers are pushed on the value stack.
        2. Before an operator is pushed, pending operators of greater or equal
           precedence are reduced, which makes both tiers left-associative.
        3. An open brace pushes a sentinel, a close brace reduces down to it.
        4. Remaining operators are reduced at the end; exactly one value must be left.

    Both stacks live only for the duration of one ``evaluate`` call.

    With ``legacy_braces`` enabled braces are skipped, so parentheses are
    accepted but do not group anything.
    """

    def __init__(self, legacy_braces: bool = False) -> None:
        self.legacy_braces = legacy_braces

    @staticmethod
    def _parse_number(token: Token) -> float:
        """
        Parse a number token into a finite float.

        :param Token token: NUMBER token

        :return: Parsed value
        :rtype: float
        :raises NumberFormatError: If the literal is malformed or overflows
        """
        try:
            value = float(token.text)
        except ValueError:
            raise NumberFormatError(token.text, token.position) from None
        if math.isinf(value):
            raise NumberFormatError(token.text, token.position)
        return value

    @staticmethod
    def reduce(values: List[float], operators: List[str]) -> float:
        """
        Pop one operator and two operands, push and return the result.

        ``b`` is the most recently pushed operand, the result is ``a op b``.

        :param List[float] values: Value stack
        :param List[str] operators: Operator stack

        :return: Computed value
        :rtype: float
        :raises EvalError: If the stacks lack an operator or two operands
        :raises DivisionError: If a division by zero or an infinite quotient occurs
        """
        if not operators or operators[-1] == OPEN_BRACE:
            raise EvalError("Invalid expression (not enough operators)")
        if len(values) < 2:
            raise EvalError(f"Invalid expression (not enough operands for {operators[-1]!r})")

        op = operators.pop()
        b = values.pop()
        a = values.pop()

        try:
            result = OPERATORS[op](a, b)
        except ZeroDivisionError:
            raise DivisionError(f"Division by zero: {a:g} / {b:g}") from None
        if op == "/" and math.isinf(result):
            raise DivisionError(f"Division result is infinite: {a:g} / {b:g}")

        logger.debug(f"Reduced {a!r} {op} {b!r} -> {result!r}")
        values.append(result)
        return result

    def _push_operator(self, token: Token, values: List[float], operators: List[str]) -> None:
        if token.text not in PRECEDENCE:
            raise EvalError(f"Unknown operator {token.text!r} at position {token.position}")
        precedence = PRECEDENCE[token.text]
        while operators and operators[-1] != OPEN_BRACE and precedence <= PRECEDENCE[operators[-1]]:
            self.reduce(values, operators)
        operators.append(token.text)

    def _close_brace(self, values: List[float], operators: List[str]) -> None:
        while operators[-1] != OPEN_BRACE:
            self.reduce(values, operators)
        operators.pop()

    def evaluate(self, tokens: Iterable[Token]) -> float:
        """
        Evaluate a token sequence.

        Operands and operators must alternate: an operand is expected at the
        start, after an operator and after an open brace.

        :param Iterable[Token] tokens: Tokens in source order

        :return: Value of the expression
        :rtype: float
        :raises EvaluationError: On any malformed token sequence
        """
        values: List[float] = []
        operators: List[str] = []
        expect_operand = True

        for token in tokens:
            if token.kind is TokenKind.NUMBER:
                if not expect_operand:
                    raise EvalError(f"Invalid expression (unexpected number {token.text!r} at position {token.position})")
                values.append(self._parse_number(token))
                expect_operand = False
            elif token.kind is TokenKind.OPERATOR:
                if expect_operand:
                    raise EvalError(f"Invalid expression (missing operand before {token.text!r} at position {token.position})")
                self._push_operator(token, values, operators)
                expect_operand = True
            elif token.kind is TokenKind.BRACE:
                if self.legacy_braces:
                    continue
                if token.text == OPEN_BRACE:
                    if not expect_operand:
                        raise EvalError(f"Invalid expression (unexpected brace at position {token.position})")
                    operators.append(OPEN_BRACE)
                else:
                    if OPEN_BRACE not in operators:
                        raise MismatchedBraceError(f"Unmatched closing brace at position {token.position}")
                    if expect_operand:
                        raise EvalError(f"Invalid expression (missing operand before ')' at position {token.position})")
                    self._close_brace(values, operators)
            else:
                raise UnsupportedTokenError(token.text, token.position)

        if expect_operand:
            raise EvalError("Invalid expression (missing operand at end)")

        while operators:
            if operators[-1] == OPEN_BRACE:
                raise MismatchedBraceError("Unmatched opening brace")
            self.reduce(values, operators)

        if len(values) != 1:
            raise EvalError(f"Invalid expression (remaining operands: {len(values)})")

        return values[0]
