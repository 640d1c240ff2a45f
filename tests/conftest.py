"""Shared pytest fixtures for tweenkit tests."""

from __future__ import annotations

import logging

import pytest

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
