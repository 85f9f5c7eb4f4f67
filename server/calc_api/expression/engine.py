from __future__ import annotations

from calc_api.expression.converter import convert
from calc_api.expression.evaluator import evaluate


def calculate(expression: str) -> float:
    """Evaluate an arithmetic expression made of numbers, ``+ - * /`` and parentheses.

    Raises a subclass of :class:`calc_api.expression.errors.EvaluationError` on the
    first problem found.
    """
    return evaluate(convert(expression))
