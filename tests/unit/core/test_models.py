"""Unit tests for core/models.py"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from docstore.core.models import Author, Document, SearchRequest


def test_document_defaults_id_and_created_to_none(alice):
    """A new Document carries no id or created until the store assigns them."""
    doc = Document(title="t", content="c", author=alice)
    assert doc.id is None
    assert doc.created is None


@pytest.mark.parametrize("missing", ["title", "content", "author"])
def test_document_requires_fields(alice, missing):
    """Missing title, content or author is rejected at construction."""
    fields = {"title": "t", "content": "c", "author": alice}
    del fields[missing]
    with pytest.raises(ValidationError):
        Document(**fields)


def test_author_requires_id_and_name():
    """Author without a name is rejected."""
    with pytest.raises(ValidationError):
        Author(id="u1")


def test_document_is_frozen(draft):
    """Stored records cannot be mutated by attribute assignment."""
    with pytest.raises(ValidationError):
        draft.title = "changed"


def test_author_value_equality():
    """Authors compare by value, not identity."""
    assert Author(id="u1", name="Alice") == Author(id="u1", name="Alice")
    assert Author(id="u1", name="Alice") != Author(id="u1", name="Alicia")


def test_document_from_mapping():
    """Nested author mappings and ISO timestamps are coerced."""
    doc = Document.model_validate({
        "id": "d1", "title": "t", "content": "c",
        "author": {"id": "u1", "name": "Alice"},
        "created": "2024-01-01T12:00:00+00:00",
    })
    assert doc.author == Author(id="u1", name="Alice")
    assert doc.created == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_search_request_all_fields_optional():
    """An empty SearchRequest has every dimension unset."""
    req = SearchRequest()
    assert req.title_prefixes is None
    assert req.contains_contents is None
    assert req.author_ids is None
    assert req.created_from is None
    assert req.created_to is None


def test_document_naive_created_is_utc(alice):
    """A created value without an offset is taken as UTC."""
    doc = Document(id="d1", title="t", content="c", author=alice, created=datetime(2024, 1, 1, 12, 0))
    assert doc.created == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_search_request_naive_bounds_are_utc():
    """Naive bounds are taken as UTC; aware bounds are kept as given."""
    aware = datetime(2024, 1, 2, tzinfo=timezone.utc)
    req = SearchRequest(created_from=datetime(2024, 1, 1), created_to=aware)
    assert req.created_from == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert req.created_to == aware
