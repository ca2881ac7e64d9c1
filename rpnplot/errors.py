"""Errors raised while parsing, evaluating and plotting expressions."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any


class FunctionErrorType(Enum):
    """What is wrong with an expression."""

    L_BRACE_NOT_FOUND = auto()
    R_BRACE_NOT_FOUND = auto()
    OPERATORS_ARE_LESS_THAN_OPERANDS = auto()
    FUNCTION_WITHOUT_ARG = auto()
    BINARY_OPERATOR_WITHOUT_TWO_OPERANDS = auto()
    INVALID_TOKEN = auto()


class InvalidFunctionError(ValueError):
    """The expression is malformed."""

    def __init__(self, err_type: FunctionErrorType, message: str) -> None:
        super().__init__(message)
        self.err_type = err_type


class FieldErrorType(Enum):
    """What is wrong with a field description."""

    NON_POSITIVE_WIDTH = auto()
    NON_POSITIVE_HEIGHT = auto()
    INVALID_DOMAIN = auto()
    INVALID_CODOMAIN = auto()


class InvalidFieldInfoError(ValueError):
    """The field description cannot be plotted."""

    def __init__(self, field_info: Any, err_type: FieldErrorType, message: str) -> None:
        super().__init__(message)
        self.field_info = field_info
        self.err_type = err_type


class TypeConversionError(ValueError):
    """A piece of text could not be converted to a number."""

    def __init__(self, value: str, message: str) -> None:
        super().__init__(message)
        self.value = value


class DomainError(ValueError):
    """A function or operator was applied outside its domain."""