"""Errors raised while tokenizing or evaluating an arithmetic expression."""


class EvaluationError(ValueError):
    """Base class for every failure of a single evaluation call."""


class LexError(EvaluationError):
    """An input character does not belong to any token class.

    ``position`` is the 1-based column of the character.
    """

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"Unexpected character {character!r} at position {position}")


class UnsupportedTokenError(EvaluationError):
    """A token was recognized but has no evaluation rule (identifiers)."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(f"Unsupported identifier {text!r} at position {position}")


class NumberFormatError(EvaluationError):
    """A number token does not parse as a finite floating-point literal."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(f"Invalid number literal {text!r} at position {position}")


class DivisionError(EvaluationError):
    """A division produced an infinite value or divided by zero."""


class EvalError(EvaluationError):
    """The token sequence does not form a well-formed expression."""


class MismatchedBraceError(EvalError):
    """An opening or closing brace has no partner."""
