import pytest

from rpnplot.errors import (
    DomainError,
    FieldErrorType,
    FunctionErrorType,
    InvalidFieldInfoError,
    InvalidFunctionError,
    TypeConversionError,
)


@pytest.mark.parametrize("err_type", list(FunctionErrorType))
def test_invalid_function_error_keeps_type_and_message(err_type):
    error = InvalidFunctionError(err_type, "broken expression")
    assert error.err_type is err_type
    assert str(error) == "broken expression"


def test_invalid_function_error_is_raised_and_caught_as_value_error():
    error = InvalidFunctionError(FunctionErrorType.INVALID_TOKEN, "bad token")
    assert error.err_type is FunctionErrorType.INVALID_TOKEN
    assert str(error) == "bad token"
    with pytest.raises(ValueError, match="bad token") as info:
        raise error
    assert info.value is error
    assert info.value.err_type is FunctionErrorType.INVALID_TOKEN


@pytest.mark.parametrize("err_type", list(FieldErrorType))
def test_invalid_field_info_error_keeps_field_info(err_type):
    field_info = object()
    error = InvalidFieldInfoError(field_info, err_type, "bad field")
    assert error.field_info is field_info
    assert error.err_type is err_type
    assert str(error) == "bad field"


def test_type_conversion_error_keeps_value():
    error = TypeConversionError("12a", "cannot convert")
    assert error.value == "12a"
    assert str(error) == "cannot convert"


def test_domain_error_message():
    error = DomainError("domain_error: Division by zero.")
    assert str(error) == "domain_error: Division by zero."
    with pytest.raises(DomainError, match="Division by zero") as info:
        raise error
    assert info.value is error


def test_error_types_are_distinct():
    function_errors = [InvalidFunctionError(t, "message") for t in FunctionErrorType]
    field_errors = [InvalidFieldInfoError(None, t, "message") for t in FieldErrorType]
    assert len({error.err_type for error in function_errors}) == 6
    assert len({error.err_type for error in field_errors}) == 4