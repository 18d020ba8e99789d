from __future__ import annotations

import logging

import pytest

from fsutils.base.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_fsutils_logger():
    """Drop handlers installed by setup_logging() so tests stay independent."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root._initialized = False  # type: ignore[attr-defined]
    root.addHandler(logging.NullHandler())
