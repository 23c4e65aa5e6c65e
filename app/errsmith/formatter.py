"""Printf-style message formatter.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import json
import re
from typing import Callable, Iterator

_PLACEHOLDER = re.compile(r"%[sdifjoO%]")
_NAN = "NaN"


def _as_string(value: object) -> str:
    return value if isinstance(value, str) else str(value)


def _as_integer(value: object) -> str:
    """Coerce to an integer, ``NaN`` when that is not possible."""
    if isinstance(value, bool):
        return str(int(value))
    try:
        return str(int(value))  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        pass
    try:
        return str(int(float(value)))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return _NAN


def _as_float(value: object) -> str:
    try:
        return str(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return _NAN


def _as_json(value: object) -> str:
    """Serialize to compact JSON text."""
    try:
        return json.dumps(value, separators=(",", ":"), default=str)
    except ValueError:
        return "[Circular]"


_CONVERTERS: dict[str, Callable[[object], str]] = {
    "%s": _as_string,
    "%d": _as_integer,
    "%i": _as_integer,
    "%f": _as_float,
    "%j": _as_json,
    "%o": repr,
    "%O": repr,
}


def format_message(template: object, *args: object) -> str:
    """Render template, consuming one argument per placeholder.

    Placeholders without a matching argument stay verbatim. Arguments left
    over once the placeholders run out are appended, separated by spaces.

    :param template: message with ``%s``-style placeholders
    :param args: substitution values
    :return str: rendered message
    """
    text = _as_string(template)
    if not args:
        return text

    remaining: Iterator[object] = iter(args)
    consumed = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal consumed
        token = match.group()
        if token == "%%":
            return "%"
        if consumed >= len(args):
            return token
        consumed += 1
        return _CONVERTERS[token](next(remaining))

    rendered = _PLACEHOLDER.sub(substitute, text)
    leftovers = [_as_string(arg) for arg in remaining]
    if leftovers:
        rendered = " ".join([rendered, *leftovers])
    return rendered


def join_message(*args: object) -> str:
    """Join message arguments without rendering any placeholder."""
    return " ".join(_as_string(arg) for arg in args)
