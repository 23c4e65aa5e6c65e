"""Test main config.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Iterator

import pytest
from loguru import logger

from errsmith import ErrorFactory, forge


@dataclass(frozen=True)
class BoundFactory:
    """Factory under test and the error type it must build."""

    factory: ErrorFactory
    error_type: type[BaseException]

    @property
    def name(self) -> str:
        """Expected error name."""
        return self.error_type.__name__


BOUND_FACTORIES = {
    "forge": BoundFactory(forge, Exception),
    "forge.error": BoundFactory(forge.error, Exception),
    "forge.type": BoundFactory(forge.type, TypeError),
    "forge.value": BoundFactory(forge.value, ValueError),
    "forge.range": BoundFactory(forge.range, IndexError),
    "forge.key": BoundFactory(forge.key, KeyError),
    "forge.attribute": BoundFactory(forge.attribute, AttributeError),
    "forge.lookup": BoundFactory(forge.lookup, LookupError),
    "forge.runtime": BoundFactory(forge.runtime, RuntimeError),
    "forge.syntax": BoundFactory(forge.syntax, SyntaxError),
    "forge.reference": BoundFactory(forge.reference, NameError),
    "forge.not_implemented": BoundFactory(
        forge.not_implemented,
        NotImplementedError,
    ),
}


@pytest.fixture(params=list(BOUND_FACTORIES), ids=list(BOUND_FACTORIES))
def bound(request: pytest.FixtureRequest) -> BoundFactory:
    """Every factory bound on the default forge."""
    return BOUND_FACTORIES[request.param]


@pytest.fixture
def log_records() -> Iterator[list[str]]:
    """Collect errsmith log messages."""
    records: list[str] = []
    logger.enable("errsmith")
    handler_id = logger.add(records.append, level="TRACE", format="{message}")
    yield records
    logger.remove(handler_id)
    logger.disable("errsmith")


def dollar_formatter(message: str, *params: object) -> str:
    """Replace ``$0``, ``$1``... with the matching param."""
    for index, param in enumerate(params):
        message = message.replace(f"${index}", str(param))
    return message


@pytest.fixture
def dollar_forge() -> Iterator[None]:
    """Swap the default forge formatter for ``dollar_formatter``."""
    forge.formatter = dollar_formatter
    yield
    forge.formatter = None
