"""Search predicates: one per request dimension, combined conjunctively"""

from datetime import datetime
from typing import Optional

from docstore.core.models import Document, SearchRequest


def matches_title(doc: Document, prefixes: Optional[list[str]]) -> bool:
    """True if no prefixes are given or the title starts with any of them."""
    if not prefixes:
        return True
    return any(doc.title.startswith(p) for p in prefixes)


def matches_content(doc: Document, needles: Optional[list[str]]) -> bool:
    """True if no substrings are given or the content contains any of them."""
    if not needles:
        return True
    return any(n in doc.content for n in needles)


def matches_author(doc: Document, author_ids: Optional[list[str]]) -> bool:
    if not author_ids:
        return True
    return doc.author.id in author_ids


def matches_created(
    doc: Document,
    created_from: Optional[datetime] = None,
    created_to: Optional[datetime] = None,
    ) -> bool:
    """True if created lies strictly between the given bounds; a None bound is open."""
    if created_from is not None and not doc.created > created_from:
        return False
    if created_to is not None and not doc.created < created_to:
        return False
    return True


def matches(request: SearchRequest, doc: Document) -> bool:
    """Return True if doc satisfies every constrained dimension of request."""
    return (
        matches_title(doc, request.title_prefixes)
        and matches_content(doc, request.contains_contents)
        and matches_author(doc, request.author_ids)
        and matches_created(doc, request.created_from, request.created_to)
    )
