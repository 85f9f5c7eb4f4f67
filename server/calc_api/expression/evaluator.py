from __future__ import annotations

import math
from typing import Iterable

from calc_api.expression.errors import (
    DivisionByZero,
    InsufficientOperands,
    InvalidNumber,
    InvalidOperation,
    MalformedExpression,
)
from calc_api.expression.tokens import APPLY, Number, Operator, Token, is_literal_char, token_from_text


def _parse_number(token: Number) -> float:
    # float() also takes "inf", "1_0" and padded text; literals are digits and "." only.
    if not token.text or not all(is_literal_char(ch) for ch in token.text):
        raise InvalidNumber(token.text)
    try:
        value = float(token.text)
    except ValueError as exc:
        raise InvalidNumber(token.text) from exc
    # Out of double range.
    if math.isinf(value):
        raise InvalidNumber(token.text)
    return value


def evaluate(tokens: Iterable[Token | str]) -> float:
    """Evaluate a postfix token sequence with a single operand stack.

    Bare strings are accepted so the evaluator can be fed hand written RPN such as
    ``["3", "4", "+"]``; anything that is neither a number nor an operator is
    rejected with :class:`InvalidOperation`.
    """
    stack: list[float] = []

    for item in tokens:
        token = token_from_text(item) if isinstance(item, str) else item

        if isinstance(token, Number):
            stack.append(_parse_number(token))
            continue

        if not isinstance(token, Operator):
            raise InvalidOperation(str(token))

        if len(stack) < 2:
            raise InsufficientOperands(token.symbol)

        right = stack.pop()
        left = stack.pop()
        if token is Operator.DIV and right == 0:
            raise DivisionByZero()
        stack.append(APPLY[token](left, right))

    if len(stack) != 1:
        raise MalformedExpression()

    return stack[0]
