"""Turning expression text into tokens and numbers."""

from __future__ import annotations

from .errors import FunctionErrorType, InvalidFunctionError, TypeConversionError
from .token import Token, TokenId

_DIGITS = "0123456789"

_WORDS = (
    ("x", TokenId.X),
    ("+", TokenId.PLUS),
    ("-", TokenId.MINUS),
    ("*", TokenId.MULT),
    ("/", TokenId.DIV),
    ("(", TokenId.L_BRACE),
    (")", TokenId.R_BRACE),
    ("sin", TokenId.SIN),
    ("cos", TokenId.COS),
    ("tan", TokenId.TAN),
    ("ctg", TokenId.CTG),
    ("sqrt", TokenId.SQRT),
    ("ln", TokenId.LN),
)


def strip_spaces(line: str) -> str:
    """Return ``line`` with every space removed."""
    return line.replace(" ", "")


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens; raise InvalidFunctionError on unknown input."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        token, length = parse_token(text[pos:])
        tokens.append(token)
        pos += length
    return tokens


def parse_token(text: str) -> tuple[Token, int]:
    """Read the token at the start of ``text`` and return it with its length."""
    if text[:1] and text[0] in _DIGITS:
        number, length = parse_number(text)
        return Token(TokenId.NUM, number), length
    for word, token_id in _WORDS:
        if text.startswith(word):
            return Token(token_id), len(word)
    raise InvalidFunctionError(
        FunctionErrorType.INVALID_TOKEN, "invalid_function: Invalid token."
    )


def parse_number(text: str) -> tuple[float, int]:
    """Read an unsigned decimal number at the start of ``text``.

    Returns the value and the number of characters it took.
    """
    int_len = digit_run_length(text)
    frac_len = 0
    if has_fraction_part(text, int_len):
        frac_len = digit_run_length(text[int_len + 1 :])
    length = int_len + (frac_len + 1 if frac_len else 0)
    return convert_to_float(text, length), length


def has_fraction_part(text: str, int_part_len: int) -> bool:
    """Whether a dot followed by a digit comes right after the integer part."""
    after = text[int_part_len + 1 : int_part_len + 2]
    return text[int_part_len : int_part_len + 1] == "." and after != "" and after in _DIGITS


def digit_run_length(text: str) -> int:
    """Number of ASCII digits at the start of ``text``."""
    return len(text) - len(text.lstrip(_DIGITS))


def convert_to_float(text: str, count: int | None = None) -> float:
    """Convert the first ``count`` characters of ``text`` to a float.

    A leading minus sign is allowed. A character other than a digit or the
    single decimal dot within ``count`` raises TypeConversionError.
    """
    if count is None:
        count = len(text)
    negative = text.startswith("-")
    if negative:
        count -= 1
        text = text[1:]

    int_len = min(digit_run_length(text), count)
    number = float(convert_to_int(text, int_len))
    if int_len != count:
        if text[int_len : int_len + 1] != ".":
            raise TypeConversionError(
                text, "logic_type_conversion_error: Can't convert symbol to digit."
            )
        fraction = text[int_len + 1 :]
        frac_len = min(digit_run_length(fraction), count - int_len - 1)
        number += convert_to_int(fraction, frac_len) / 10**frac_len

    return -number if negative else number


def convert_to_int(text: str, count: int | None = None) -> int:
    """Read the first ``count`` characters of ``text`` as decimal digits."""
    digits = text if count is None else text[:count]
    value = 0
    for char in digits:
        value = value * 10 + ord(char) - ord("0")
    return value