"""Shared test fixtures."""

import pytest


@pytest.fixture
def component_dir(tmp_path):
    """A `widgets` component directory inside a temp project root."""
    path = tmp_path / "widgets"
    path.mkdir()
    return path
