"""Factory options.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FactoryOptions(BaseModel):
    """Options shared by every call made through one factory.

    ``formatter`` replaces message rendering; ``None`` means the default
    printf-style formatter. With ``format_messages`` off the message
    arguments are joined with spaces and never rendered. With
    ``concat_messages`` off the cause message is not appended to an
    explicit message.
    """

    model_config = ConfigDict(validate_assignment=True)

    formatter: Callable[..., Any] | None = Field(default=None)
    format_messages: bool = True
    concat_messages: bool = True

    @field_validator("formatter", mode="before")
    @classmethod
    def _formatter_callable(cls, value: object) -> object:
        """Reject formatters that cannot be called."""
        if value is not None and not callable(value):
            raise ValueError("formatter must be callable")
        return value


def normalize_options(
    options: FactoryOptions | None = None,
    **overrides: Any,
) -> FactoryOptions:
    """Build options from an instance, keyword overrides or nothing."""
    if options is None:
        return FactoryOptions(**overrides)
    if not overrides:
        return options
    fields = {
        name: getattr(options, name) for name in FactoryOptions.model_fields
    }
    fields.update(overrides)
    return FactoryOptions(**fields)
