from unittest import mock

import pytest

from rpnplot.errors import (
    FieldErrorType,
    FunctionErrorType,
    InvalidFieldInfoError,
    InvalidFunctionError,
)
from rpnplot.field import FieldInfo, format_field, generate_field
from rpnplot.menu import ActionType, Menu, main
from rpnplot.parser import tokenize
from rpnplot.shunting_yard import to_postfix


def _info():
    return FieldInfo(width=11, height=11, domain=(-5.0, 5.0), codomain=(-5.0, 5.0), center=(5, 5))


def _menu(text="x"):
    return Menu(text, _info())


def test_initial_state_and_field():
    menu = _menu()
    assert menu.action_type is ActionType.SELECT
    assert menu.arrow_pos == 0
    assert menu.field == generate_field(to_postfix(tokenize("x")), _info())


def test_menu_text_marks_selected_option():
    text = _menu().menu_text()
    assert text.startswith("Type: SELECT\n>>> Function: x\nWidth: 11\n")
    assert "q - quit; m - change mode;" in text


def test_field_info_is_copied():
    info = _info()
    menu = Menu("x", info)
    menu.update("s")
    menu.update("m")
    menu.update("d")
    assert menu.field_info.width == info.width + 1
    assert info.width == 11


@pytest.mark.parametrize("key", ["q", "Q"])
def test_quit(key):
    assert _menu().update(key) is False


def test_select_moves_down_and_wraps_up():
    menu = _menu()
    assert menu.update("s") is True
    assert menu.arrow_pos == 1
    menu.update("w")
    menu.update("k")
    assert menu.arrow_pos == 5
    menu.update("j")
    assert menu.arrow_pos == 0


def test_mode_toggle_off_function_option():
    menu = _menu()
    menu.update("s")
    menu.update("M")
    assert menu.action_type is ActionType.EDIT
    menu.update("m")
    assert menu.action_type is ActionType.SELECT


def test_edit_width_changes_field():
    menu = _menu()
    menu.update("s")
    menu.update("m")
    menu.update("d")
    assert menu.field_info.width == 12
    assert all(len(row) == 12 for row in menu.field)
    assert "Width: 12\n" in menu.menu_text()
    menu.update("h")
    assert menu.field_info.width == 11


def test_edit_height_to_zero_raises():
    menu = Menu("x", FieldInfo(1, 1, (-1.0, 1.0), (-1.0, 1.0), (0, 0)))
    menu.update("s")
    menu.update("s")
    menu.update("m")
    with pytest.raises(InvalidFieldInfoError) as exc:
        menu.update("s")
    assert exc.value.err_type is FieldErrorType.NON_POSITIVE_HEIGHT


def test_edit_domain_first_and_second():
    menu = _menu()
    for _ in range(3):
        menu.update("s")
    menu.update("m")
    menu.update("d")
    assert menu.field_info.domain == (-4.0, 5.0)
    menu.update("s")
    assert menu.field_info.domain == (-4.0, 4.0)
    assert "Domain: [-4.000000, 4.000000]" in menu.menu_text()


def test_edit_center_moves_axes():
    menu = _menu()
    menu.update("w")
    menu.update("m")
    menu.update("l")
    menu.update("k")
    assert menu.field_info.center == (6, 6)
    assert menu.field[0][6] == "^"


def test_edit_unrelated_key_changes_nothing():
    menu = _menu()
    for _ in range(4):
        menu.update("s")
    menu.update("m")
    before = dataclasses_snapshot(menu)
    assert menu.update("z") is True
    assert dataclasses_snapshot(menu) == before


def dataclasses_snapshot(menu):
    info = menu.field_info
    return (info.width, info.height, info.domain, info.codomain, info.center)


def test_function_update_through_reader():
    menu = _menu()
    menu.read_function = lambda: "x * x"
    assert menu.update("m") is True
    assert menu.function_text == "x * x"
    assert menu.action_type is ActionType.EDIT
    assert menu.field == generate_field(to_postfix(tokenize("x*x")), _info())
    assert ">>> Function: x * x\n" in menu.menu_text()


def test_invalid_token_raises():
    with pytest.raises(InvalidFunctionError) as exc:
        _menu("x $ 2")
    assert exc.value.err_type is FunctionErrorType.INVALID_TOKEN


def test_too_many_operands_raises():
    with pytest.raises(InvalidFunctionError) as exc:
        _menu("x x")
    assert exc.value.err_type is FunctionErrorType.OPERATORS_ARE_LESS_THAN_OPERANDS


def test_domain_error_at_zero_is_accepted():
    menu = _menu("ln x")
    assert menu.field == generate_field(to_postfix(tokenize("lnx")), _info())


def test_render_field_prints_field(capsys):
    menu = _menu()
    menu.render_field()
    assert capsys.readouterr().out == format_field(menu.field)


def test_render_menu_prints_menu(capsys):
    menu = _menu()
    with mock.patch("subprocess.run"):
        menu.render_menu()
    assert menu.menu_text() in capsys.readouterr().out


def test_main_reports_invalid_function(monkeypatch, capsys):
    answers = iter(["2 $ x"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    with mock.patch("subprocess.run"):
        status = main([])
    assert status == 1
    assert "Invalid function: Invalid token detected." in capsys.readouterr().out


def test_main_reports_invalid_width(monkeypatch, capsys):
    answers = iter(["x", "0", "5", "2", "2", "-1", "1", "-1", "1"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    with mock.patch("subprocess.run"):
        status = main([])
    out = capsys.readouterr().out
    assert status == 1
    assert "Width can not be less than or equal to zero. Given: 0" in out