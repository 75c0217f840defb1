"""Pytest fixtures for doccatalog tests."""

import pytest

from doccatalog import BorrowLedger, Catalog, build, build_user
from doccatalog.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Drop DOCCATALOG_* overrides and the cached settings around each test."""
    import os

    for var in list(os.environ):
        if var.upper().startswith("DOCCATALOG_"):
            monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def ledger():
    return BorrowLedger()


@pytest.fixture
def java_guide():
    return build("Java Guide", "Oracle", 2020, "Programming", isbn="123")


@pytest.fixture
def clean_code():
    return build("Clean Code", "Martin", 2008, "Programming", isbn="456")


@pytest.fixture
def janek():
    return build_user("Janek")
