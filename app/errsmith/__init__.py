"""Errsmith: compose errors from a cause, props and a formatted message.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from loguru import logger

from .config import FactoryOptions
from .exceptions import ErrsmithError, InvalidErrorTypeError
from .extend import extend
from .factory import ErrorFactory, ErrorForge, forge
from .formatter import format_message
from .normalize import normalize_args
from .projection import ErrorEncoder, dumps, to_dict
from .types import ErrorLike, NormalizedArgs, is_error_like

logger.disable(__name__)

__all__ = [
    "ErrorEncoder",
    "ErrorFactory",
    "ErrorForge",
    "ErrorLike",
    "ErrsmithError",
    "FactoryOptions",
    "InvalidErrorTypeError",
    "NormalizedArgs",
    "dumps",
    "extend",
    "forge",
    "format_message",
    "is_error_like",
    "normalize_args",
    "to_dict",
]
