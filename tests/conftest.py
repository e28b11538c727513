"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop handlers installed by configure_logging so they do not outlive capsys."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_reqcheck_handler", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
