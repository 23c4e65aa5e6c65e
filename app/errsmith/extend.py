"""Merge a cause and a props bag into an error.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import copy
from collections.abc import Mapping, MutableMapping
from types import MemberDescriptorType
from typing import Any, TypeVar

from loguru import logger as loguru_logger

from .fields import (
    IDENTITY_FIELDS,
    RESERVED_ATTRIBUTES,
    error_message,
    error_name,
    own_fields,
)
from .stack import join_stacks, own_stack
from .types import is_error_like

log = loguru_logger.bind(name="errsmith")

ErrorT = TypeVar("ErrorT")


def _clone_exception(error: BaseException) -> BaseException:
    clone = copy.copy(error)
    clone.__dict__.update(vars(error))
    clone.__cause__ = error.__cause__
    clone.__context__ = error.__context__
    clone.__suppress_context__ = error.__suppress_context__
    return clone.with_traceback(error.__traceback__)


def clone_error(error: ErrorT) -> ErrorT:
    """Shallow copy of error, or error itself when it cannot be copied."""
    try:
        if isinstance(error, BaseException):
            return _clone_exception(error)  # type: ignore[return-value]
        return copy.copy(error)
    except Exception as exc:  # noqa: BLE001
        log.debug(
            "Cannot copy {}, extending it in place: {}",
            type(error).__name__,
            exc,
        )
        return error


def assign_field(target: object, key: str, value: Any) -> None:
    """Set one field on target, skipping what cannot be set."""
    if isinstance(target, MutableMapping):
        target[key] = value
        return
    if key in RESERVED_ATTRIBUTES:
        log.debug("Skipping reserved attribute {!r}", key)
        return
    try:
        setattr(target, key, value)
    except (AttributeError, TypeError) as exc:
        log.debug("Cannot set {!r} on {}: {}", key, type(target).__name__, exc)
        return

    # Slot-backed fields such as AttributeError.name skip __dict__.
    slot = getattr(type(target), key, None)
    if isinstance(target, BaseException) and isinstance(
        slot,
        MemberDescriptorType,
    ):
        vars(target)[key] = value


def set_message(target: object, message: str) -> None:
    """Replace the message, keeping ``str(target)`` in line with it."""
    if isinstance(target, BaseException):
        target.args = (message,)
    if isinstance(target, SyntaxError):
        target.msg = message
    assign_field(target, "message", message)


def _merge_cause(target: object, cause: object, fields: Mapping) -> None:
    if not error_message(target):
        cause_message = error_message(cause)
        if cause_message:
            set_message(target, cause_message)
    if not error_name(target):
        assign_field(target, "name", error_name(cause))

    for key, value in fields.items():
        if key in IDENTITY_FIELDS:
            continue
        assign_field(target, key, value)


def _merge_props(target: object, fields: Mapping) -> None:
    for key, value in fields.items():
        if key == "stack":
            continue
        if key == "message":
            set_message(target, "" if value is None else str(value))
            continue
        assign_field(target, key, value)


def extend_error(
    error: ErrorT,
    cause: object | None = None,
    props: object | None = None,
) -> ErrorT:
    """Compose error in place.

    Fields of the cause are copied first, fields of props override them.
    ``stack`` is never copied: it is composed from the error's own trace
    followed by the cause stack.

    :param error: freshly constructed or existing error
    :param cause: error-like value being wrapped
    :param props: fields merged onto the result
    :return: the composed error
    """
    if cause is not None and not is_error_like(cause):
        log.debug("Ignoring cause {} that is not error-like", type(cause))
        cause = None

    cause_fields = own_fields(cause)
    props_fields = own_fields(props)
    if props is not None and not props_fields:
        log.debug("Props {} contribute no fields", type(props).__name__)

    target = error
    if cause is not None:
        _merge_cause(target, cause, cause_fields)
    _merge_props(target, props_fields)

    assign_field(target, "stack", join_stacks(own_stack(target), cause))
    if isinstance(target, BaseException) and isinstance(cause, BaseException):
        if cause is not target:
            target.__cause__ = cause
    return target


def extend(
    error: ErrorT,
    cause: object | None = None,
    props: object | None = None,
) -> ErrorT:
    """Enrich an existing error with a cause and/or props.

    A second argument that is not error-like and comes without a third one
    is taken as props. The given error is left untouched and an enriched
    copy is returned.
    """
    if props is None and cause is not None and not is_error_like(cause):
        cause, props = None, cause
    return extend_error(clone_error(error), cause, props)
