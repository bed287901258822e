"""Shared pytest fixtures for wordfilter tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wordfilter.boundary import AsciiBoundaryPolicy, UnicodeBoundaryPolicy


@pytest.fixture(params=[UnicodeBoundaryPolicy, AsciiBoundaryPolicy], ids=['unicode', 'ascii'])
def policy(request):
    """Run a test once per boundary regime."""
    return request.param()


@pytest.fixture
def unicode_policy():
    return UnicodeBoundaryPolicy()


@pytest.fixture
def ascii_policy():
    return AsciiBoundaryPolicy()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a logging test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
