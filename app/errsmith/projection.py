"""Plain-dict projection of errors for JSON serialization.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import json
import traceback
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from .fields import (
    IDENTITY_FIELDS,
    error_message,
    error_name,
    error_stack,
    own_fields,
)


def _stack_of(error: object) -> str | None:
    stack = error_stack(error)
    if stack is not None:
        return stack
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        return "".join(traceback.format_exception(error)).rstrip("\n")
    return None


def to_dict(error: object) -> dict[str, Any]:
    """Return all fields of error as a plain dict.

    ``name``, ``message`` and ``stack`` come first, then every public field
    in definition order. Callables are left out. ``stack`` is omitted when
    the error has none. Feeding the result back returns an equal dict.

    :param error: exception, mapping or error-like object
    :return dict: JSON-ready fields
    """
    result: dict[str, Any] = {
        "name": error_name(error),
        "message": error_message(error),
    }
    stack = _stack_of(error)
    if stack is not None:
        result["stack"] = stack

    for key, value in own_fields(error).items():
        if key in IDENTITY_FIELDS or callable(value):
            continue
        result[key] = value
    return result


def _fallback(value: Any) -> Any:
    if isinstance(value, BaseException):
        return to_jsonable_python(to_dict(value), fallback=_fallback)
    return str(value)


def dumps(error: object, **kwargs: Any) -> str:
    """Serialize error to JSON text."""
    return json.dumps(
        to_jsonable_python(to_dict(error), fallback=_fallback),
        **kwargs,
    )


class ErrorEncoder(json.JSONEncoder):
    """JSON encoder that projects exceptions with ``to_dict``."""

    def default(self, o: Any) -> Any:
        """Encode exceptions and values pydantic knows how to dump."""
        if isinstance(o, BaseException):
            return to_dict(o)
        try:
            return to_jsonable_python(o)
        except PydanticSerializationError:
            return super().default(o)
