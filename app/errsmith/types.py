"""Error-like contracts and normalized call arguments.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

Formatter = Callable[..., str]


@runtime_checkable
class ErrorLike(Protocol):
    """Anything that exposes a name and a message.

    Covers foreign exception objects that are not part of the local
    ``BaseException`` hierarchy.
    """

    name: Any
    message: Any


def is_error_like(value: object) -> bool:
    """Check whether value may be used as a cause."""
    if isinstance(value, BaseException):
        return True
    if isinstance(value, str) or value is None:
        return False
    if isinstance(value, Mapping):
        return "name" in value and "message" in value
    if isinstance(value, type):
        return False
    return isinstance(value, ErrorLike)


@dataclass(frozen=True, slots=True)
class NormalizedArgs:
    """Variadic call arguments sorted into cause, props and message."""

    cause: object | None = None
    props: object | None = None
    message: str = ""
