"""Token types produced by the tokenizer."""
from enum import Enum
import re
from typing import Dict, Pattern

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TokenKind(str, Enum):
    """Lexical class of a token."""

    IDENTIFIER = "identifier"
    NUMBER = "number"
    OPERATOR = "operator"
    BRACE = "brace"


# Text each kind may carry, matched against the whole token text
TEXT_PATTERNS: Dict[TokenKind, Pattern[str]] = {
    TokenKind.IDENTIFIER: re.compile(r"[A-Za-z][A-Za-z0-9]*"),
    TokenKind.NUMBER: re.compile(r"[0-9][0-9.]*"),
    TokenKind.OPERATOR: re.compile(r"[-+*/]"),
    TokenKind.BRACE: re.compile(r"[()]"),
}


class Token(BaseModel):
    """
    A classified lexical unit with its exact source text.

    Number tokens keep the full literal (e.g. ``"3.14"`` or even ``"1.2.3"``),
    numeric parsing happens in the evaluator.
    """

    model_config = ConfigDict(frozen=True)

    kind: TokenKind = Field(..., description="Lexical class of the token")
    text: str = Field(..., min_length=1, description="Exact matched substring")
    position: int = Field(..., ge=1, description="1-based column of the first character in the input")

    @model_validator(mode="after")
    def text_matches_kind(self) -> "Token":
        """Ensure the text belongs to the character class of the kind."""
        if not TEXT_PATTERNS[self.kind].fullmatch(self.text):
            raise ValueError(f"Text {self.text!r} is not a valid {self.kind.value} token")
        return self
