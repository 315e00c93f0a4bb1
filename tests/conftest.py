"""
Shared fixtures for pv tests.
"""

import logging

import pytest

from pv.core import config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Give every test its own config instance and a clean PV_* environment."""
    for key in config.Config.DEFAULTS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, '_config', config.Config())
    yield config.get_config()

    # main() reconfigures the root logger; don't leak handlers bound to captured streams
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)
