"""Root fixtures shared by all test packages."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Keep structlog context variables from leaking between tests."""
    yield
    structlog.contextvars.clear_contextvars()
