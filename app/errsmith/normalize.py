"""Sort variadic factory arguments into cause, props and message.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Sequence

from loguru import logger as loguru_logger

from .config import FactoryOptions
from .fields import error_message
from .formatter import format_message, join_message
from .types import NormalizedArgs, is_error_like

log = loguru_logger.bind(name="errsmith")

MESSAGE_SEPARATOR = " \n"


def render_message(
    template: str,
    args: Sequence[object],
    options: FactoryOptions,
) -> str:
    """Render template with the factory formatter."""
    if not options.format_messages:
        return join_message(template, *args)

    formatter = options.formatter or format_message
    message = formatter(template, *args)
    return message if isinstance(message, str) else str(message)


def concat_messages(message: str, cause_message: str) -> str:
    """Put the cause message under the new one."""
    if not cause_message:
        return message
    if not message:
        return cause_message
    return f"{message}{MESSAGE_SEPARATOR}{cause_message}"


def normalize_args(
    args: Sequence[object],
    options: FactoryOptions | None = None,
) -> NormalizedArgs:
    """Classify call arguments.

    The first error-like argument is the cause. The next argument that is
    not a string is the props bag, whatever its shape. The first remaining
    string is the message template and everything after it feeds the
    formatter. ``None`` in the cause or props slot is skipped.

    :param args: positional arguments of a factory call
    :param options: factory options, defaults apply when missing
    :return NormalizedArgs: cause, props and the final message
    """
    if options is None:
        options = FactoryOptions()

    remaining = list(args)
    if not remaining:
        return NormalizedArgs()

    cause: object | None = None
    props: object | None = None

    if is_error_like(remaining[0]):
        cause = remaining.pop(0)
    elif remaining[0] is None and len(remaining) > 1:
        remaining.pop(0)

    if remaining and not isinstance(remaining[0], str):
        props = remaining.pop(0)

    message = ""
    if remaining and isinstance(remaining[0], str):
        message = render_message(remaining[0], remaining[1:], options)
    elif remaining:
        log.debug(
            "Ignoring {} argument(s) without a message template",
            len(remaining),
        )

    if cause is not None:
        cause_message = error_message(cause)
        if options.concat_messages or not message:
            message = concat_messages(message, cause_message)

    log.trace(
        "Normalized args: cause={}, props={}, message={!r}",
        type(cause).__name__ if cause is not None else None,
        type(props).__name__ if props is not None else None,
        message,
    )
    return NormalizedArgs(cause=cause, props=props, message=message)
