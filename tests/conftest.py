"""Shared pytest fixtures and configuration for the jamplate-cli test suite.

Guidelines
----------
* No real engine: the compile/execute collaborator is always a mock.
* Core tests must be pure: no filesystem, no console output.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` during a test."""
    package_logger = logging.getLogger("jamplate_cli")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
