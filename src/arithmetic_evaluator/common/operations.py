"""Pydantic models for arithmetic operation requests and results."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OperationRequest(BaseModel):
    """Represents a single expression read from the input, with its line number."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Arithmetic expression as a string")
    line_number: int = Field(default=1, ge=1, description="Line number in the input")


class OperationResult(BaseModel):
    """Represents the outcome of evaluating one operation: a value or an error."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    line_number: int = Field(default=1, ge=1, description="Line number in the input")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result of the expression")
    error: Optional[str] = Field(default=None, description="Error message if evaluation failed")
    error_kind: Optional[str] = Field(default=None, description="Name of the error class if evaluation failed")

    @model_validator(mode="after")
    def result_xor_error(self) -> "OperationResult":
        """Ensure exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' or 'error' must be set")
        return self

    @property
    def succeeded(self) -> bool:
        return self.error is None
