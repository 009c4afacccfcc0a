"""
Module: conftest.py

Date: 2026-10-18

Global pytest configuration and fixtures for the sprm test suite.
"""

import logging
import os
import sys

# Add project root to sys.path so 'sprm' imports without an install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from sprm.config import APP_NAME
from sprm.services.prompt_service import CannedLineReader


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip local-only tests on CI."""
    _ = session
    _ = config

    if "CI" in os.environ or "GITHUB_ACTIONS" in os.environ:
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")
        for item in items:
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture(autouse=True)
def reset_sprm_logger():
    """Drop handlers installed by ConfigureLogger so streams don't leak between tests."""
    yield
    logger = logging.getLogger(APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def make_file(tmp_path):
    """Factory creating a file under tmp_path with the given content."""

    def _make(name: str, content: bytes = b"content") -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return str(path)

    return _make


@pytest.fixture
def answers():
    """Factory for a CannedLineReader replaying the given answers."""

    def _answers(*lines: str) -> CannedLineReader:
        return CannedLineReader(list(lines))

    return _answers
