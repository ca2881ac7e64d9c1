"""User-facing descriptions of errors."""

from __future__ import annotations

import sys
from typing import TextIO

from .errors import (
    FieldErrorType,
    FunctionErrorType,
    InvalidFieldInfoError,
    InvalidFunctionError,
    TypeConversionError,
)

_FUNCTION_MESSAGES = {
    FunctionErrorType.L_BRACE_NOT_FOUND: "No closing left parenthesis.",
    FunctionErrorType.R_BRACE_NOT_FOUND: "No closing right parenthesis.",
    FunctionErrorType.OPERATORS_ARE_LESS_THAN_OPERANDS: "Operands are more than operators.",
    FunctionErrorType.FUNCTION_WITHOUT_ARG: "Function without argument.",
    FunctionErrorType.BINARY_OPERATOR_WITHOUT_TWO_OPERANDS: "Binary operator without two operands.",
    FunctionErrorType.INVALID_TOKEN: "Invalid token detected.",
}


def _num(value: float) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def _field_detail(error: InvalidFieldInfoError) -> str:
    info = error.field_info
    if error.err_type is FieldErrorType.NON_POSITIVE_WIDTH:
        return f"Width can not be less than or equal to zero. Given: {_num(info.width)}"
    if error.err_type is FieldErrorType.NON_POSITIVE_HEIGHT:
        return f"Height can not be less than or equal to zero. Given: {_num(info.height)}"
    if error.err_type is FieldErrorType.INVALID_DOMAIN:
        lo, hi = info.domain
        return f"[n, m] (domain) - 'n' can not be more than 'm'. Given: [{_num(lo)}, {_num(hi)}]"
    lo, hi = info.codomain
    return f"[k, l] (codomain) - 'k' can not be more than 'l'. Given: [{_num(lo)}, {_num(hi)}]"


def error_message(error: BaseException) -> str | None:
    """The message to show the user for ``error``, or None if it has none."""
    if isinstance(error, InvalidFunctionError):
        detail = _FUNCTION_MESSAGES[error.err_type]
        return f"Invalid function: {detail} Please, rewrite your function."
    if isinstance(error, InvalidFieldInfoError):
        return f"Invalid field info: {_field_detail(error)}\nPlease, correct it."
    if isinstance(error, TypeConversionError):
        return (
            f"Type conversion error: Incompatible object '{error.value}'. "
            "Please, use object with valid type."
        )
    return None


def print_error(error: BaseException, out: TextIO | None = None) -> None:
    """Write the user message for ``error`` to ``out``, if it has one."""
    message = error_message(error)
    if message is not None:
        print(message, file=sys.stdout if out is None else out)