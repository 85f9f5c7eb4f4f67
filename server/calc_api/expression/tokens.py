from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

LITERAL_CHARS = frozenset("0123456789.")


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator | None":
        try:
            return cls(symbol)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class Paren(Enum):
    LEFT = "("
    RIGHT = ")"

    def __str__(self) -> str:
        return self.value


PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
}

# Division is applied by the evaluator after its zero check.
APPLY: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.truediv,
}


@dataclass(frozen=True)
class Number:
    """A numeric literal exactly as it appeared in the input."""

    text: str

    def __str__(self) -> str:
        return self.text


Token = Union[Number, Operator, Paren]


def is_literal_char(ch: str) -> bool:
    return ch in LITERAL_CHARS


def token_from_text(text: str) -> "Token | str":
    """Interpret a bare RPN string; unknown text is returned unchanged."""
    op = Operator.from_symbol(text)
    if op is not None:
        return op
    if text and all(is_literal_char(ch) for ch in text):
        return Number(text)
    return text
