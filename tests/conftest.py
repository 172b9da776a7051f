"""Shared pytest fixtures for the tyck test suite."""

from __future__ import annotations

import pytest

from tyck.environment import Environment


@pytest.fixture
def env():
    """A fresh environment with no scopes."""
    return Environment.empty()
