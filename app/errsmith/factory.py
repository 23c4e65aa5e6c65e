"""Error factories.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any, Callable, Generic, TypeVar

from .config import FactoryOptions, normalize_options
from .exceptions import InvalidErrorTypeError
from .extend import extend, extend_error
from .formatter import format_message
from .normalize import normalize_args
from .projection import to_dict
from .types import Formatter

ErrorT = TypeVar("ErrorT")


class ErrorFactory(Generic[ErrorT]):
    """Callable that always builds one error type.

    Each call normalizes its arguments, renders the message, constructs
    ``error_type(message)`` and extends the result with the cause and
    props. Errors raised by ``error_type`` itself propagate unchanged.
    """

    extend = staticmethod(extend)
    to_dict = staticmethod(to_dict)

    def __init__(
        self,
        error_type: Callable[[str], ErrorT],
        options: FactoryOptions | None = None,
        **overrides: Any,
    ) -> None:
        """Bind error type and options."""
        if not callable(error_type):
            raise InvalidErrorTypeError(
                f"Error type must be callable, got {error_type!r}",
            )
        self.error_type = error_type
        self.options = normalize_options(options, **overrides)

    @property
    def formatter(self) -> Formatter:
        """Formatter used to render messages."""
        return self.options.formatter or format_message

    @formatter.setter
    def formatter(self, formatter: Formatter | None) -> None:
        self.options.formatter = formatter

    def __call__(self, *args: object) -> ErrorT:
        """Create a composed error."""
        normalized = normalize_args(args, self.options)
        error = self.error_type(normalized.message)
        return extend_error(error, normalized.cause, normalized.props)

    def __repr__(self) -> str:
        """Return factory repr."""
        name = getattr(self.error_type, "__name__", repr(self.error_type))
        return f"{type(self).__name__}({name})"


class ErrorForge(ErrorFactory[Exception]):
    """Default entry point with factories for the built-in error types.

    The bound factories share the options of the forge, so replacing
    ``forge.formatter`` changes them too.
    """

    def __init__(
        self,
        options: FactoryOptions | None = None,
        **overrides: Any,
    ) -> None:
        """Create the forge and its bound factories."""
        super().__init__(Exception, options, **overrides)
        self.error = ErrorFactory(Exception, self.options)
        self.type = ErrorFactory(TypeError, self.options)
        self.value = ErrorFactory(ValueError, self.options)
        self.range = ErrorFactory(IndexError, self.options)
        self.key = ErrorFactory(KeyError, self.options)
        self.attribute = ErrorFactory(AttributeError, self.options)
        self.lookup = ErrorFactory(LookupError, self.options)
        self.runtime = ErrorFactory(RuntimeError, self.options)
        self.syntax = ErrorFactory(SyntaxError, self.options)
        self.reference = ErrorFactory(NameError, self.options)
        self.not_implemented = ErrorFactory(
            NotImplementedError,
            self.options,
        )

    def custom(
        self,
        error_type: Callable[[str], ErrorT],
        *args: object,
    ) -> ErrorT:
        """Create a composed error of a one-off type."""
        return ErrorFactory(error_type, self.options)(*args)


forge = ErrorForge()
