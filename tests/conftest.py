"""Root test configuration: deterministic clocks, ids and sample documents"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import DocumentStore


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Returns T0, T0+1s, T0+2s, ... on successive calls."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current += self.step
        return now


@pytest.fixture(name="clock")
def clock_fixture():
    return StepClock()


@pytest.fixture(name="store")
def store_fixture(clock):
    """Empty store with a step clock and sequential ids doc-1, doc-2, ..."""
    seq = count(1)
    return DocumentStore(id_factory=lambda: f"doc-{next(seq)}", clock=clock)


@pytest.fixture(name="alice")
def alice_fixture():
    return Author(id="u1", name="Alice")


@pytest.fixture(name="bob")
def bob_fixture():
    return Author(id="u2", name="Bob")


@pytest.fixture(name="draft")
def draft_fixture(alice):
    """An unsaved document (no id, no created)."""
    return Document(title="Intro", content="Hello world", author=alice)
