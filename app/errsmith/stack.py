"""Stack capture and composition.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys
import traceback
from types import FrameType, TracebackType
from typing import Iterable, Iterator

from .fields import error_message, error_name, error_stack

PACKAGE = __name__.partition(".")[0]
STACK_HEADER = "Traceback (most recent call last):\n"
STACK_SEPARATOR = "\n\n"


def is_internal_frame(frame: FrameType) -> bool:
    """Check whether frame runs errsmith code."""
    module = frame.f_globals.get("__name__", "")
    return module == PACKAGE or module.startswith(f"{PACKAGE}.")


def _public_frames(
    frames: Iterable[tuple[FrameType, int]],
) -> Iterator[tuple[FrameType, int]]:
    return (
        (frame, lineno)
        for frame, lineno in frames
        if not is_internal_frame(frame)
    )


def capture_stack() -> traceback.StackSummary:
    """Extract the current call stack without errsmith frames."""
    summary = traceback.StackSummary.extract(
        _public_frames(traceback.walk_stack(sys._getframe())),
    )
    summary.reverse()
    return summary


def extract_traceback(tb: TracebackType) -> traceback.StackSummary:
    """Extract a raised traceback without errsmith frames."""
    return traceback.StackSummary.extract(
        _public_frames(traceback.walk_tb(tb)),
    )


def render_stack(summary: traceback.StackSummary, error: object) -> str:
    """Render frames followed by the ``Name: message`` line."""
    name = error_name(error)
    message = error_message(error)
    tail = f"{name}: {message}" if message else name
    return "".join([STACK_HEADER, *summary.format(), tail])


def own_stack(error: object) -> str:
    """Trace of error itself.

    A stack composed earlier wins, then the traceback of a raised error,
    then the stack at the point of the call.
    """
    stack = error_stack(error)
    if stack is not None:
        return stack

    tb = getattr(error, "__traceback__", None)
    if isinstance(tb, TracebackType):
        return render_stack(extract_traceback(tb), error)
    return render_stack(capture_stack(), error)


def cause_stack(cause: object) -> str:
    """Full stack text of a cause."""
    stack = error_stack(cause)
    if stack is not None:
        return stack
    if isinstance(cause, BaseException):
        return "".join(traceback.format_exception(cause)).rstrip("\n")
    return f"{error_name(cause)}: {error_message(cause)}"


def join_stacks(stack: str, cause: object | None) -> str:
    """Append the cause stack under the new one."""
    if cause is None:
        return stack
    return f"{stack}{STACK_SEPARATOR}{cause_stack(cause)}"
