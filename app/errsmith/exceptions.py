"""Exceptions raised by errsmith itself.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    INVALID_ERROR_TYPE_ERROR = 1


class ErrsmithError(Exception):
    """Misuse of the errsmith API.

    Every subclass declares its own ``ErrorCodes`` member, so a caller can
    tell the failures apart without matching on messages.
    """

    code: ErrorCodes = ErrorCodes.BASE_ERROR

    def __init_subclass__(cls) -> None:
        """Check that the subclass declares its own code."""
        super().__init_subclass__()

        if not isinstance(vars(cls).get("code"), ErrorCodes):
            raise AttributeError(
                f"{cls.__name__}.code must be set to an ErrorCodes member",
            )

    def __str__(self) -> str:
        """Prefix the message with the error code."""
        return f"[{self.code.name}] {super().__str__()}"


class InvalidErrorTypeError(ErrsmithError, TypeError):
    """Raised when a factory is bound to something that is not callable."""

    code = ErrorCodes.INVALID_ERROR_TYPE_ERROR
