"""Test classes OperationRequest and OperationResult."""
from pydantic import ValidationError
import pytest

from arithmetic_evaluator.common.operations import OperationRequest, OperationResult


def test_operation_request_valid() -> None:
    """Test that a valid OperationRequest can be created."""
    req = OperationRequest(expression="2 + 2 * 3", line_number=4)
    assert req.expression == "2 + 2 * 3"
    assert req.line_number == 4


def test_operation_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        # int instead of str
        OperationRequest(expression=123)


def test_operation_request_invalid_line_number() -> None:
    """Line numbers start at 1."""
    with pytest.raises(ValidationError):
        OperationRequest(expression="1", line_number=0)


def test_operation_result_valid() -> None:
    """Test that a valid OperationResult can be created."""
    res = OperationResult(expression="2 + 2 * 3", result=8.0)
    assert res.expression == "2 + 2 * 3"
    assert res.result == 8.0
    assert res.succeeded
    assert isinstance(res.result, float)


def test_operation_result_error() -> None:
    """A failed operation carries its message and error class name."""
    res = OperationResult(expression="3/0", error="Division by zero: 3 / 0", error_kind="DivisionError")
    assert not res.succeeded
    assert res.result is None
    assert res.error_kind == "DivisionError"


@pytest.mark.parametrize("kwargs", [
    {},
    {"result": 1.0, "error": "boom"},
])
def test_operation_result_requires_result_xor_error(kwargs) -> None:
    """Exactly one of result and error must be given."""
    with pytest.raises(ValidationError):
        OperationResult(expression="1", **kwargs)


def test_operation_result_invalid_expression_type() -> None:
    """Test that invalid expression type raises a validation error."""
    with pytest.raises(ValidationError):
        OperationResult(expression=42, result=8.0)


def test_operation_result_invalid_result_type() -> None:
    """Test that invalid result type raises a validation error."""
    with pytest.raises(ValidationError):
        OperationResult(expression="2 + 2", result="not a float")
