"""Fixtures and configuration for pytest."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "cli: mark test as a command line test")


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Restore the default loguru handler after CLI runs reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Fixture capturing loguru output as 'LEVEL message' strings."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.rstrip("\n")),
        level="DEBUG",
        format="{level} {message}",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def examples_dir() -> Path:
    """Fixture providing the directory of sample front-end dumps."""
    return EXAMPLES_DIR
