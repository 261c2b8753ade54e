"""Shared pytest fixtures."""

import pytest

from numseq.core.config import NumSeqConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against default settings, independent of the environment."""
    set_config(NumSeqConfig())
    yield
    set_config(None)
