"""Interactive prompts for the expression and the field description."""

from __future__ import annotations

from .field import FieldInfo
from .parser import convert_to_float


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def read_function() -> str:
    """Ask for the expression and return the line typed."""
    _prompt("Enter the function: ")
    line = input()
    print()
    return line


def ask_number(prompt: str) -> float:
    """Ask for a number; the first word typed is converted."""
    _prompt(prompt)
    words: list[str] = []
    while not words:
        words = input().split()
    return convert_to_float(words[0])


def read_field_info() -> FieldInfo:
    """Ask for every part of a field description."""
    width = int(ask_number("Enter field width: "))
    height = int(ask_number("Enter field height: "))
    print()

    print("Enter center of coordinates (x, y): ")
    cx = int(ask_number("Enter 'x': "))
    cy = int(ask_number("Enter 'y': "))
    print()

    print("Enter domain [n, m]: ")
    n = ask_number("Enter 'n': ")
    m = ask_number("Enter 'm': ")
    print()

    print("Enter codomain [k, l]: ")
    k = ask_number("Enter 'k': ")
    l = ask_number("Enter 'l': ")

    return FieldInfo(
        width=width, height=height, domain=(n, m), codomain=(k, l), center=(cx, cy)
    )