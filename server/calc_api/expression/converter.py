"""Infix to postfix conversion (shunting-yard).

Only bracket structure and precedence are enforced here. Operand counts and
literal syntax are left to the evaluator, so ``"5+"`` and ``"1.2.3"`` convert
without complaint.
"""

from __future__ import annotations

from calc_api.expression.errors import EmptyExpression, InvalidCharacter, MismatchedParentheses
from calc_api.expression.tokens import Number, Operator, Paren, Token, is_literal_char


def strip_whitespace(expression: str) -> str:
    return "".join(expression.split())


def convert(expression: str) -> list[Token]:
    """Convert an infix expression into a list of tokens in postfix order."""
    cleaned = strip_whitespace(expression)
    if not cleaned:
        raise EmptyExpression()

    output: list[Token] = []
    stack: list[Operator | Paren] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            output.append(Number("".join(buffer)))
            buffer.clear()

    for ch in cleaned:
        if is_literal_char(ch):
            buffer.append(ch)
            continue

        flush()

        if ch == Paren.LEFT.value:
            stack.append(Paren.LEFT)
        elif ch == Paren.RIGHT.value:
            while stack and stack[-1] is not Paren.LEFT:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses()
            stack.pop()
        else:
            op = Operator.from_symbol(ch)
            if op is None:
                raise InvalidCharacter(ch)
            # Equal precedence pops first: operators are left-associative.
            while stack and isinstance(stack[-1], Operator) and stack[-1].precedence >= op.precedence:
                output.append(stack.pop())
            stack.append(op)

    flush()

    while stack:
        top = stack.pop()
        if top is Paren.LEFT:
            raise MismatchedParentheses()
        output.append(top)

    return output
