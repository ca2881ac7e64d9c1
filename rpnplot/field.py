"""Plotting a postfix expression onto a character field."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from .calculation import evaluate_postfix
from .errors import DomainError, FieldErrorType, InvalidFieldInfoError
from .token import Token

EMPTY_CELL = "."
AXIS_CELL = "o"
RIGHT_ARROW = ">"
UP_ARROW = "^"
POINT_CELL = "*"


@dataclass
class FieldInfo:
    """Size of the field, the plotted ranges and where the axes cross."""

    width: int
    height: int
    domain: tuple[float, float]
    codomain: tuple[float, float]
    center: tuple[int, int]


def validate_field_info(info: FieldInfo) -> None:
    """Raise InvalidFieldInfoError if ``info`` cannot be plotted."""
    if info.width <= 0:
        raise InvalidFieldInfoError(
            info,
            FieldErrorType.NON_POSITIVE_WIDTH,
            "invalid_field_info: Negative or zero width error.",
        )
    if info.height <= 0:
        raise InvalidFieldInfoError(
            info,
            FieldErrorType.NON_POSITIVE_HEIGHT,
            "invalid_field_info: Negative or zero height error.",
        )
    if info.domain[0] > info.domain[1]:
        raise InvalidFieldInfoError(
            info,
            FieldErrorType.INVALID_DOMAIN,
            "invalid_field_info: Invalid domain error.",
        )
    if info.codomain[0] > info.codomain[1]:
        raise InvalidFieldInfoError(
            info,
            FieldErrorType.INVALID_CODOMAIN,
            "invalid_field_info: Invalid codomain error.",
        )


def empty_field(info: FieldInfo) -> list[list[str]]:
    """A field holding only the background and the coordinate axes."""
    field = [[EMPTY_CELL] * info.width for _ in range(info.height)]
    cx, cy = info.center
    if 0 <= cy < info.height:
        field[cy] = [AXIS_CELL] * info.width
        field[cy][-1] = RIGHT_ARROW
    if 0 <= cx < info.width:
        for row in field:
            row[cx] = AXIS_CELL
        field[0][cx] = UP_ARROW
    return field


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def _sample_points(start: float, stop: float, step: float) -> Iterator[float]:
    x = start
    while x < stop:
        yield x
        following = x + step
        if following == x:
            return
        x = following


def generate_field(postfix: Iterable[Token], info: FieldInfo) -> list[list[str]]:
    """Plot the postfix expression ``postfix`` as y = f(x) on a new field."""
    validate_field_info(info)
    field = empty_field(info)
    tokens = list(postfix)

    x_step = (info.domain[1] - info.domain[0]) / info.width
    y_step = (info.codomain[1] - info.codomain[0]) / info.height
    cx, cy = info.center

    for x in _sample_points(info.domain[0], info.domain[1], x_step):
        col = _round_half_away(x / x_step) + cx
        if not 0 <= col < info.width:
            continue
        try:
            y = evaluate_postfix(tokens, x)
        except DomainError:
            continue
        if not info.codomain[0] <= y <= info.codomain[1] or y_step == 0:
            continue
        row = cy - _round_half_away(y / y_step)
        if 0 <= row < info.height:
            field[row][col] = POINT_CELL

    return field


def format_field(field: Sequence[Sequence[str]]) -> str:
    """The field as text, one line per row."""
    return "".join("".join(row) + "\n" for row in field)


def render_field(field: Sequence[Sequence[str]], out: TextIO | None = None) -> None:
    """Write the field to ``out`` (standard output by default)."""
    stream = sys.stdout if out is None else out
    stream.write(format_field(field))
    stream.flush()