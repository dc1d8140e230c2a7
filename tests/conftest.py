"""Shared test fixtures for synonym-graph."""

import pytest

from synonym_graph import SynonymService, SynonymStore


@pytest.fixture
def store():
    """Create an empty store for testing."""
    return SynonymStore()


@pytest.fixture
def store_with_data(store):
    """Store with two groups joined through 'joyful'."""
    store.link("Happy", ["Joyful", "cheerful"])
    store.link("joyful", ["Elated"])
    store.link("sad", ["unhappy"])
    return store


@pytest.fixture
def service(store):
    """Service over the empty store."""
    return SynonymService(store)
