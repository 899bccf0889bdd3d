"""Pytest configuration and fixtures."""

import os

import pytest

# Qt must not try to open a display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tests.fakes import FakeHost, FakeRenderer


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def scenario_a():
    return [
        {"id": "a", "rank": 2, "label": "Alpha"},
        {"id": "b", "rank": 1, "label": "Beta"},
        {"id": "c", "label": "Gamma"},
    ]


@pytest.fixture(scope="session")
def qapp():
    from barinventory.app.application import create_app
    app = create_app()
    yield app
