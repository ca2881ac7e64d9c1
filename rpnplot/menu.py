"""Interactive menu that plots an expression and lets the user adjust the plot."""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from collections.abc import Callable, Sequence
from enum import Enum

from .calculation import evaluate_postfix
from .errors import DomainError
from .field import FieldInfo, generate_field, render_field
from .messages import print_error
from .parser import strip_spaces, tokenize
from .shunting_yard import to_postfix
from .terminal import clear_screen, raw_mode
from .token import Token
from .user_input import read_field_info, read_function


class ActionType(Enum):
    """Whether keys move the selection or change the selected value."""

    SELECT = "SELECT"
    EDIT = "EDIT"


_OPTION_LABELS = (
    "Function: ",
    "Width: ",
    "Height: ",
    "Domain: ",
    "Codomain: ",
    "Center: ",
)

_HELP_TEXT = (
    "q - quit; m - change mode;\n"
    "w, d (k, l) - move up (SELECT), increase value (EDIT);\n"
    "s, a (j, h) - move down (SELECT), decrease value (EDIT);\n"
    "In case of domain, codomain and center:\n"
    "d, a (l, h) - to change the first value;\n"
    "w, s (k, j) - to change the second value;\n"
)

_PAIR_FIELDS = {3: "domain", 4: "codomain", 5: "center"}


def _compile_function(text: str) -> list[Token]:
    """Parse expression text into postfix tokens, checking it evaluates at x = 0."""
    postfix = to_postfix(tokenize(strip_spaces(text)))
    try:
        evaluate_postfix(postfix, 0.0)
    except DomainError:
        pass
    return postfix


def _step(key: str, increase: str, decrease: str) -> int:
    if key and key in increase:
        return 1
    if key and key in decrease:
        return -1
    return 0


class Menu:
    """State of the interactive plot: expression, field description and cursor."""

    def __init__(self, function_text: str, field_info: FieldInfo) -> None:
        self.function_text = function_text
        self.postfix = _compile_function(function_text)
        self.field_info = dataclasses.replace(field_info)
        self.field = generate_field(self.postfix, self.field_info)
        self.action_type = ActionType.SELECT
        self.arrow_pos = 0
        self.read_function: Callable[[], str] = read_function
        self._values = [self._option_value(i) for i in range(len(_OPTION_LABELS))]

    def _option_value(self, idx: int) -> str:
        info = self.field_info
        if idx == 0:
            return self.function_text
        if idx == 1:
            return str(int(info.width))
        if idx == 2:
            return str(int(info.height))
        if idx == 3:
            return f"[{info.domain[0]:f}, {info.domain[1]:f}]"
        if idx == 4:
            return f"[{info.codomain[0]:f}, {info.codomain[1]:f}]"
        return f"({int(info.center[0])}, {int(info.center[1])})"

    def _refresh_option(self, idx: int) -> None:
        self._values[idx] = self._option_value(idx)

    def _regenerate_field(self) -> None:
        self.field = generate_field(self.postfix, self.field_info)

    def menu_text(self) -> str:
        """The menu as text: mode, editable options and key help."""
        lines = [f"Type: {self.action_type.value}\n"]
        for idx, (label, value) in enumerate(zip(_OPTION_LABELS, self._values)):
            marker = ">>> " if idx == self.arrow_pos else ""
            lines.append(f"{marker}{label}{value}\n")
        lines.append(_HELP_TEXT)
        return "".join(lines)

    def render_menu(self) -> None:
        """Clear the screen and print the menu."""
        clear_screen()
        sys.stdout.write(self.menu_text())
        sys.stdout.flush()

    def render_field(self) -> None:
        """Print the plotted field."""
        render_field(self.field)

    def update(self, key: str) -> bool:
        """Handle one key press; return False when the user asks to quit."""
        key = key.lower()
        if key == "m":
            if self.arrow_pos == 0 and self.action_type is ActionType.SELECT:
                self._update_function()
            self.action_type = (
                ActionType.EDIT
                if self.action_type is ActionType.SELECT
                else ActionType.SELECT
            )
            return True
        if key == "q":
            return False

        if self.action_type is ActionType.SELECT:
            self._move_arrow(key)
        elif self._edit(key):
            self._refresh_option(self.arrow_pos)
            self._regenerate_field()
        return True

    def _update_function(self) -> None:
        text = self.read_function()
        self.postfix = _compile_function(text)
        self.function_text = text
        self._regenerate_field()
        self._refresh_option(self.arrow_pos)

    def _move_arrow(self, key: str) -> None:
        step = _step(key, "sajh", "wdkl")
        if step:
            self.arrow_pos = (self.arrow_pos + step) % len(_OPTION_LABELS)

    def _shift_pair(self, pos: int, index: int, step: int) -> None:
        name = _PAIR_FIELDS[pos]
        pair = list(getattr(self.field_info, name))
        pair[index] += step
        setattr(self.field_info, name, tuple(pair))

    def _edit(self, key: str) -> bool:
        pos = self.arrow_pos
        if pos in (1, 2):
            step = _step(key, "wdkl", "sajh")
            if not step:
                return False
            if pos == 1:
                self.field_info.width += step
            else:
                self.field_info.height += step
        elif pos in _PAIR_FIELDS:
            step = _step(key, "dl", "ah")
            if step:
                self._shift_pair(pos, 0, step)
                return True
            step = _step(key, "wk", "sj")
            if not step:
                return False
            self._shift_pair(pos, 1, step)
        return True


def _read_key(fd: int) -> str:
    with raw_mode(fd):
        data = os.read(fd, 1)
    return data.decode("latin-1")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive plotter; return the process exit status."""
    argparse.ArgumentParser(
        prog="rpnplot",
        description="Plot y = f(x) in the terminal and adjust the plot with keys.",
    ).parse_args(argv)

    try:
        clear_screen()
        text = read_function()
        _compile_function(text)
        info = read_field_info()
        menu = Menu(text, info)
        fd = sys.stdin.fileno()
        while True:
            menu.render_menu()
            menu.render_field()
            key = _read_key(fd)
            if not key:
                break
            if not menu.update(key):
                break
    except Exception as error:  # noqa: BLE001 - every failure ends the session
        print_error(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())