"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import DocumentStore


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture(name="store")
def store_fixture():
    """An empty in-memory store with default settings."""
    return DocumentStore()


@pytest.fixture(name="doc1")
def doc1_fixture():
    return Document(
        id="doc-1", title="Report A", content="budget numbers",
        author=Author(id="u1", name="Ann"), created=_utc(2023, 1, 1),
    )


@pytest.fixture(name="doc2")
def doc2_fixture():
    return Document(
        id="doc-2", title="Summary B", content="budget report",
        author=Author(id="u2", name="Bob"), created=_utc(2023, 6, 1),
    )


@pytest.fixture(name="seeded")
def seeded_fixture(store, doc1, doc2):
    """The store holding doc1 then doc2."""
    store.save(doc1)
    store.save(doc2)
    return store
