"""Shared fixtures"""

import pytest

from logged import LoggingConfig, LoggingContext, set_context


@pytest.fixture
def context():
    """Install a fresh synchronous context as the process default."""
    ctx = LoggingContext(LoggingConfig(async_dispatch=False))
    previous = set_context(ctx)
    yield ctx
    set_context(previous)
    ctx.shutdown()
