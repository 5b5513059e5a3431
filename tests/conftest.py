"""Shared fixtures for the sqlfragments test suite."""

import logging

import pytest

from sqlfragments.query_builder import QueryBuilder
from sqlfragments.settings import BuilderSettings
from sqlfragments.settings import main as settings_main


@pytest.fixture(autouse=True)
def reset_settings_singleton(monkeypatch):
    """Give every test a fresh settings singleton."""
    monkeypatch.setattr(settings_main, "_settings", None)
    yield


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by ``setup_logging`` so caplog keeps working."""
    yield
    package_logger = logging.getLogger("sqlfragments")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def settings():
    return BuilderSettings(_env_file=None)


@pytest.fixture
def builder(settings):
    return QueryBuilder(settings)
