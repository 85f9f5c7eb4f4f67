from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from functools import cached_property

from langchain_core.tools import tool

from calc_api.core.config import get_settings
from calc_api.core.exceptions import AppError
from calc_api.expression.engine import calculate
from calc_api.expression.errors import EvaluationError
from calc_api.models.calculator import CalculationResult

logger = logging.getLogger("calc_api.calculator")


class ExpressionTooLong(AppError):
    status_code = 422
    error_type = "EXPRESSION_TOO_LONG"


def format_result(value: float) -> str:
    """Render a float as the shortest decimal that round-trips, never in exponent form.

    ``14.0`` becomes ``"14"`` and ``1e21`` becomes ``"1000000000000000000000"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


@dataclass
class CalculatorService:
    max_expression_length: int | None = None

    @classmethod
    def from_settings(cls) -> "CalculatorService":
        settings = get_settings()
        return cls(max_expression_length=settings.max_expression_length or None)

    def evaluate(self, expression: str) -> CalculationResult:
        if self.max_expression_length and len(expression) > self.max_expression_length:
            logger.info(
                "calculator.rejected",
                extra={"error_type": ExpressionTooLong.error_type, "length": len(expression)},
            )
            raise ExpressionTooLong(
                f"expression exceeds {self.max_expression_length} characters",
                details={"limit": self.max_expression_length},
            )

        try:
            value = calculate(expression)
        except EvaluationError as exc:
            logger.info("calculator.rejected", extra={"error_type": exc.error_type})
            raise

        result = format_result(value)
        logger.info("calculator.evaluated", extra={"result": result})
        return CalculationResult(expression=expression, value=value, result=result)

    @cached_property
    def langchain_tool(self):
        service = self

        @tool("calculator", return_direct=True)
        def _calculator(expression: str) -> str:
            """Evaluate an arithmetic expression using + - * / and parentheses."""
            return service.evaluate(expression).result

        return _calculator
