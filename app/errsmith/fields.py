"""Uniform field access over exceptions, mappings and error-like objects.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger as loguru_logger

log = loguru_logger.bind(name="errsmith")

IDENTITY_FIELDS = frozenset({"name", "message", "stack"})

# Attributes owned by BaseException itself; cause and props never touch them.
RESERVED_ATTRIBUTES = frozenset(
    {
        "args",
        "with_traceback",
        "add_note",
        "__traceback__",
        "__cause__",
        "__context__",
        "__suppress_context__",
        "__notes__",
        "__dict__",
        "__class__",
    },
)


def own_fields(value: object) -> dict[str, Any]:
    """Snapshot public fields of value, in definition order.

    :param value: exception, mapping, pydantic model or plain object
    :return dict: copy of the fields, empty when value has none
    """
    if value is None or isinstance(value, (str, bytes)):
        return {}
    if isinstance(value, Mapping):
        return {
            key: item for key, item in value.items() if isinstance(key, str)
        }

    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump) and not isinstance(value, BaseException):
        return dict(model_dump())

    try:
        attributes = vars(value)
    except TypeError:
        log.debug("No fields on {}", type(value).__name__)
        return {}
    return {
        key: item
        for key, item in attributes.items()
        if isinstance(key, str) and not key.startswith("_")
    }


def get_field(value: object, key: str) -> Any:
    """Read one field from a mapping or an object."""
    if isinstance(value, Mapping):
        return value.get(key)
    if isinstance(value, BaseException):
        return vars(value).get(key)
    return getattr(value, key, None)


def error_name(error: object) -> str:
    """Name of an error-like value."""
    name = get_field(error, "name")
    if isinstance(name, str):
        return name
    if isinstance(error, BaseException):
        return type(error).__name__
    return "" if name is None else str(name)


def error_message(error: object) -> str:
    """Message of an error-like value."""
    message = get_field(error, "message")
    if isinstance(message, str):
        return message
    if isinstance(error, KeyError) and len(error.args) == 1:
        return str(error.args[0])
    if isinstance(error, BaseException):
        return str(error)
    return "" if message is None else str(message)


def error_stack(error: object) -> str | None:
    """Stack text stored on an error-like value, if any."""
    stack = get_field(error, "stack")
    if stack is None:
        return None
    return stack if isinstance(stack, str) else str(stack)
