"""Evaluation of postfix token sequences."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .errors import DomainError, FunctionErrorType, InvalidFunctionError
from .token import Token, TokenId


def substitute_x(tokens: Iterable[Token], value: float) -> list[Token]:
    """Return ``tokens`` with every x replaced by the number ``value``."""
    return [Token(TokenId.NUM, value) if t.id is TokenId.X else t for t in tokens]


def evaluate_postfix(tokens: Iterable[Token], x: float = 0.0) -> float:
    """Evaluate a postfix expression with x set to ``x``."""
    stack: list[float] = []
    for token in substitute_x(tokens, x):
        if token.id is TokenId.NUM:
            stack.append(token.num)
        elif token.is_function():
            if not stack:
                raise InvalidFunctionError(
                    FunctionErrorType.FUNCTION_WITHOUT_ARG,
                    "invalid_function: Function without argument error.",
                )
            stack.append(apply_function(token.id, stack.pop()))
        elif token.is_binary_operator():
            if len(stack) < 2:
                raise InvalidFunctionError(
                    FunctionErrorType.BINARY_OPERATOR_WITHOUT_TWO_OPERANDS,
                    "invalid_function: Binary operator without two operands error.",
                )
            first = stack.pop()
            second = stack.pop()
            stack.append(apply_binary_operator(token.id, first, second))

    if len(stack) != 1:
        raise InvalidFunctionError(
            FunctionErrorType.OPERATORS_ARE_LESS_THAN_OPERANDS,
            "invalid_function: Operators are less then operands error.",
        )
    return stack[0]


def apply_function(token_id: TokenId, value: float) -> float:
    """Apply the one-argument function ``token_id`` to ``value``."""
    if token_id is TokenId.SIN:
        return math.nan if math.isinf(value) else math.sin(value)
    if token_id is TokenId.COS:
        return math.nan if math.isinf(value) else math.cos(value)
    if token_id is TokenId.TAN:
        if math.isinf(value):
            return math.nan
        if math.fmod(value, math.pi) == math.pi / 2:
            raise DomainError(
                "domain_error: The tangent is not defined for x = pi/2 + pi*k"
            )
        return math.tan(value)
    if token_id is TokenId.CTG:
        if math.isinf(value):
            return math.nan
        if math.fmod(value, math.pi) == 0:
            raise DomainError("domain_error: The cotangent is not defined for x = pi*k")
        return 1 / math.tan(value)
    if token_id is TokenId.SQRT:
        if value < 0:
            raise DomainError("domain_error: The sqrt is not defined for x < 0")
        return math.sqrt(value)
    if token_id is TokenId.LN:
        if value <= 0:
            raise DomainError("domain_error: The ln is not defined for x <= 0")
        return math.log(value)
    raise ValueError(f"{token_id.name} is not a function")


def apply_binary_operator(token_id: TokenId, first: float, second: float) -> float:
    """Apply ``token_id`` with ``second`` on the left and ``first`` on the right."""
    if token_id is TokenId.PLUS:
        return second + first
    if token_id is TokenId.MINUS:
        return second - first
    if token_id is TokenId.MULT:
        return second * first
    if token_id is TokenId.DIV:
        if first == 0:
            raise DomainError("domain_error: Division by zero.")
        return second / first
    raise ValueError(f"{token_id.name} is not a binary operator")