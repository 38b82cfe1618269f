"""Global pytest fixtures for by-example."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() done by the CLI under test."""
    yield
    structlog.reset_defaults()
