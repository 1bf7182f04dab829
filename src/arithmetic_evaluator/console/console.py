"""Console driver: evaluate one expression per input line and print each result."""
import sys
from typing import Iterable, List, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.errors import EvaluationError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.operations import OperationRequest, OperationResult
from arithmetic_evaluator.common.parser import ExpressionParser


def format_result(value: float) -> str:
    """Format a value like a default C++ output stream (six significant digits)."""
    return f"{value:g}"


class ExpressionConsole(BaseModel):
    """
    Driver loop around the expression evaluator.

    Lifecycle of each line:
        - Evaluate the expression on its own, nothing is carried over
        - Print a blank line followed by the result, or by ``ERROR: <message>``
        - Continue with the next line until the input ends
    """

    model_config = ConfigDict(frozen=True)

    legacy_braces: bool = Field(default=False, description="Ignore parentheses like the legacy calculator")

    def evaluate(self, request: OperationRequest) -> OperationResult:
        """
        Evaluate a single request and capture its outcome.

        :param OperationRequest request: Expression and its line number

        :return: Result holding either the value or the error
        :rtype: OperationResult
        """
        logger.info(f"🧮🏁 Evaluating line {request.line_number}: {request.expression}")

        try:
            value = ExpressionParser.evaluate(request.expression, legacy_braces=self.legacy_braces)
        except EvaluationError as exc:
            logger.error(
                f"🧮❌ Evaluation failed on line {request.line_number}: {exc}\n"
                f"Invalid arithmetic expression, could not evaluate: {request.expression!r}"
            )
            return OperationResult(
                expression=request.expression,
                line_number=request.line_number,
                error=str(exc),
                error_kind=type(exc).__name__,
            )

        logger.info(f"🧮✅ Line {request.line_number} = {value}")
        return OperationResult(expression=request.expression, line_number=request.line_number, result=value)

    @staticmethod
    def render(result: OperationResult) -> str:
        """Render a result as printed on the console, leading blank line included."""
        if result.succeeded:
            return f"\n{format_result(result.result)}\n"
        return f"\nERROR: {result.error}\n"

    def run(self, requests: Iterable[OperationRequest], out: Optional[TextIO] = None) -> List[OperationResult]:
        """
        Evaluate every request in order and write each rendered result to ``out``.

        :param Iterable[OperationRequest] requests: Requests to evaluate
        :param TextIO out: Output stream, defaults to stdout

        :return: All results in input order
        :rtype: List[OperationResult]
        """
        out = out if out is not None else sys.stdout
        results: List[OperationResult] = []

        for request in requests:
            result = self.evaluate(request)
            out.write(self.render(result))
            # Flush so interactive users see each answer immediately
            out.flush()
            results.append(result)

        failed = sum(1 for result in results if not result.succeeded)
        logger.info(f"📋 Evaluated {len(results)} expression(s), {failed} failed")
        return results
