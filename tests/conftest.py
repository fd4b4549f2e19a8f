"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from notepad.main import create_app
from notepad.services.notes import NoteStore


@pytest.fixture()
def store() -> NoteStore:
    """Empty note store."""
    return NoteStore()


@pytest.fixture()
def client(store: NoteStore) -> Iterator[TestClient]:
    """HTTP client for an app backed by the *store* fixture."""
    with TestClient(create_app(store)) as c:
        yield c
