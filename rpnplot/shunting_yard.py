"""Conversion of infix token sequences to postfix order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .errors import FunctionErrorType, InvalidFunctionError
from .token import Token, TokenId


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """Reorder infix ``tokens`` into postfix (reverse Polish) order."""
    pending = deque(tokens)
    output: list[Token] = []
    operators: list[Token] = []

    while pending:
        token = pending.popleft()
        if token.is_num_or_x():
            output.append(token)
        elif token.is_binary_operator():
            if (
                operators
                and operators[-1].is_binary_operator()
                and token.priority <= operators[-1].priority
            ):
                output.append(operators.pop())
            operators.append(token)
        elif token.is_function():
            if not _has_function_arg(pending):
                raise InvalidFunctionError(
                    FunctionErrorType.FUNCTION_WITHOUT_ARG,
                    "invalid_function: Function without argument error.",
                )
            operators.append(token)
        elif token.id is TokenId.L_BRACE:
            operators.append(token)
        elif token.id is TokenId.R_BRACE:
            _unwind_to_left_brace(operators, output)
            if operators and operators[-1].is_function():
                output.append(operators.pop())

    while operators:
        token = operators.pop()
        if token.id is TokenId.L_BRACE:
            raise InvalidFunctionError(
                FunctionErrorType.R_BRACE_NOT_FOUND,
                "invalid_function: Right brace not found.",
            )
        output.append(token)

    return output


def _has_function_arg(pending: deque[Token]) -> bool:
    if not pending:
        return False
    nxt = pending[0]
    return nxt.is_num_or_x() or nxt.is_function() or nxt.id is TokenId.L_BRACE


def _unwind_to_left_brace(operators: list[Token], output: list[Token]) -> None:
    while operators:
        token = operators.pop()
        if token.id is TokenId.L_BRACE:
            return
        output.append(token)
    raise InvalidFunctionError(
        FunctionErrorType.L_BRACE_NOT_FOUND, "invalid_function: Left brace not found."
    )