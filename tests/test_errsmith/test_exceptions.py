"""Tests for errsmith exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from errsmith import ErrorFactory, ErrsmithError, InvalidErrorTypeError, forge
from errsmith.exceptions import ErrorCodes


def test_subclass_requires_own_code() -> None:
    """Test that ErrsmithError subclasses declare their own code."""
    with pytest.raises(AttributeError, match="InvalidError.code must be set"):

        class InvalidError(ErrsmithError):
            """Invalid error without code."""

    with pytest.raises(AttributeError, match="PlainCodeError.code"):

        class PlainCodeError(ErrsmithError):
            """Invalid error with a plain int code."""

            code = 1  # type: ignore[assignment]


def test_error_code_in_message() -> None:
    """Test the code name prefixes the message."""
    error = InvalidErrorTypeError("bad")

    assert str(error) == "[INVALID_ERROR_TYPE_ERROR] bad"
    assert error.args == ("bad",)


@pytest.mark.parametrize("error_type", [42, "ValueError", None])
def test_factory_requires_callable(error_type: object) -> None:
    """Test factories refuse error types that cannot be called."""
    with pytest.raises(InvalidErrorTypeError, match="must be callable"):
        ErrorFactory(error_type)  # type: ignore[arg-type]


def test_custom_requires_callable() -> None:
    """Test forge.custom refuses error types that cannot be called."""
    with pytest.raises(InvalidErrorTypeError):
        forge.custom(42, "message")  # type: ignore[arg-type]


def test_invalid_error_type_error() -> None:
    """Test InvalidErrorTypeError fits both hierarchies."""
    error = InvalidErrorTypeError("bad")

    assert isinstance(error, ErrsmithError)
    assert isinstance(error, TypeError)
    assert error.code == ErrorCodes.INVALID_ERROR_TYPE_ERROR
    assert ErrsmithError.code == ErrorCodes.BASE_ERROR


def test_factory_accepts_plain_callables() -> None:
    """Test any callable returning an error can back a factory."""

    def make_error(message: str) -> ValueError:
        return ValueError(f"made: {message}")

    err = ErrorFactory(make_error)({"code": 1}, "thing")

    assert isinstance(err, ValueError)
    assert str(err) == "made: thing"
    assert err.code == 1
