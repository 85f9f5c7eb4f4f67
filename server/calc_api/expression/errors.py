"""Error kinds raised while converting or evaluating an expression.

Every kind is a distinct subclass so callers can match on type instead of
comparing messages. All of them are caller-induced, hence the shared 422 status.
"""

from __future__ import annotations

from typing import Any, ClassVar

from calc_api.core.exceptions import AppError


class EvaluationError(AppError):
    status_code = 422
    error_type = "EVALUATION_ERROR"
    # Name of the ``details`` entry holding the offending input, if the kind has one.
    detail_key: ClassVar[str | None] = None

    @classmethod
    def from_details(cls, details: Any = None) -> "EvaluationError":
        if cls.detail_key is None:
            return cls()
        if not isinstance(details, dict):
            details = {}
        return cls(str(details.get(cls.detail_key, "")))


class EmptyExpression(EvaluationError):
    error_type = "EMPTY_EXPRESSION"

    def __init__(self) -> None:
        super().__init__("empty expression")


class MismatchedParentheses(EvaluationError):
    error_type = "MISMATCHED_PARENTHESES"

    def __init__(self) -> None:
        super().__init__("mismatched parentheses")


class InvalidCharacter(EvaluationError):
    error_type = "INVALID_CHARACTER"
    detail_key = "character"

    def __init__(self, char: str) -> None:
        super().__init__(f"invalid character: {char}", details={self.detail_key: char})
        self.char = char


class InvalidNumber(EvaluationError):
    error_type = "INVALID_NUMBER"
    detail_key = "literal"

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid number: {text}", details={self.detail_key: text})
        self.text = text


class InsufficientOperands(EvaluationError):
    error_type = "INSUFFICIENT_OPERANDS"
    detail_key = "operator"

    def __init__(self, operator: str) -> None:
        super().__init__(
            f"not enough operands for operation: {operator}",
            details={self.detail_key: operator},
        )
        self.operator = operator


class DivisionByZero(EvaluationError):
    error_type = "DIVISION_BY_ZERO"

    def __init__(self) -> None:
        super().__init__("division by zero")


class InvalidOperation(EvaluationError):
    error_type = "INVALID_OPERATION"
    detail_key = "token"

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid operation: {text}", details={self.detail_key: text})
        self.text = text


class MalformedExpression(EvaluationError):
    error_type = "MALFORMED_EXPRESSION"

    def __init__(self) -> None:
        super().__init__("invalid expression")


ERRORS_BY_TYPE: dict[str, type[EvaluationError]] = {
    cls.error_type: cls
    for cls in (
        EmptyExpression,
        MismatchedParentheses,
        InvalidCharacter,
        InvalidNumber,
        InsufficientOperands,
        DivisionByZero,
        InvalidOperation,
        MalformedExpression,
    )
}
