"""
Pytest configuration and fixtures for finparse tests.

This file provides:
- Fixed reference date for relative date parsing
- Default parser configuration independent of the environment
- Clean process-wide config cache between tests
- Logging cleanup after configure_logging()
"""
import os
import logging
import logging.handlers
import sys
from datetime import date

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from finparse import settings
from finparse.settings import ParserConfig


# Среда, 12 марта 2025
REFERENCE_DATE = date(2025, 3, 12)


# =============================================================================
# Parser Fixtures
# =============================================================================

@pytest.fixture
def today() -> date:
    """Reference date used instead of date.today()."""
    return REFERENCE_DATE


@pytest.fixture
def config() -> ParserConfig:
    """Default parser configuration, not read from the environment."""
    return ParserConfig()


@pytest.fixture
def parse(today, config):
    """Parser bound to the reference date and default config."""
    from finparse.transaction_parser import parse_transaction_text

    def _parse(text):
        return parse_transaction_text(text, today=today, config=config)

    return _parse


@pytest.fixture(autouse=True)
def clean_config_cache():
    """Each test starts without a cached process-wide config."""
    settings.reset_config()
    yield
    settings.reset_config()


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def restore_logging():
    """Undo handlers and levels installed by configure_logging()."""
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    root_level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers_before and type(handler) in (
                logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(root_level)
    logging.getLogger('finparse').setLevel(logging.NOTSET)
