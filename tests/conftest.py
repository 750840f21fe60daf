"""Shared pytest fixtures and configuration for the firmpack test suite.

Guidelines
----------
* Core tests are pure: no output, no mocking.
* Optional UI packages (rich, questionary) are hidden via ``sys.modules``.
* Logging configured by ``--verbose`` is reset after every test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_firmpack_logger() -> Iterator[None]:
    package_logger = logging.getLogger("firmpack")
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    yield
    handlers, level, propagate = saved
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
