"""Test configuration for pytest."""

import logging
import os
import pytest

from parlance import create_assertion, default_engine
from parlance.matchers import NUMBER, STRING


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['PARLANCE_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # The resolver and executor log every decision at DEBUG
    for logger_name in ['parlance.engine.resolver', 'parlance.engine.executor']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


@pytest.fixture
def engine():
    """The default engine built from the built-in assertions."""
    return default_engine


@pytest.fixture
def custom_definitions():
    """A couple of user definitions that do not overlap the built-ins."""
    return [
        create_assertion([STRING, "to be a palindrome"], lambda s: s == s[::-1]),
        create_assertion([NUMBER, "to be divisible by", NUMBER], lambda n, d: n % d == 0),
    ]
