"""Shared test fixtures for tenpin."""

import pytest

from tenpin.core.game import Game


@pytest.fixture
def tmp_output(tmp_path):
    """Provide a temporary output directory for test runs."""
    return tmp_path / "output"


@pytest.fixture
def game():
    return Game()
