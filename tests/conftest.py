"""
Pytest configuration and fixtures for sortparam tests.
"""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def clean_sort_environment(monkeypatch):
    """Keep SORTPARAM_ variables from the host out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("SORTPARAM_"):
            monkeypatch.delenv(name, raising=False)
