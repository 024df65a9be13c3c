"""In-memory document store: upsert, point lookup and filtered search"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, Iterator
from uuid import uuid4

from docstore.core.matching import matches
from docstore.core.models import Document, SearchRequest
from docstore.crud.errors import DocumentNotFoundError, DuplicateDocumentError
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)

_UPDATABLE = ("author", "content", "title")


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DocumentStore(DocumentRepo):
    """Holds documents keyed by id, in insertion order.

    Every public operation runs under a single re-entrant lock, so a save's
    lookup, comparison and write happen as one step.
    """
    id_factory: Callable[[], str] = _new_id
    clock: Callable[[], datetime] = _utcnow
    _docs: dict[str, Document] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    def save(self, doc: Document) -> Document:
        """Create doc when it has no id, otherwise update the stored record with that id.

        Raises DocumentNotFoundError if doc.id is set but unknown; nothing is inserted.
        """
        with self._lock:
            if doc.id is not None:
                return self._update(doc)
            return self._create(doc)

    def find_by_id(self, doc_id: str) -> Document | None:
        with self._lock:
            return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return documents matching request in insertion order. None matches everything."""
        request = request or SearchRequest()
        with self._lock:
            return [doc for doc in self._docs.values() if matches(request, doc)]

    def load(self, docs: Iterable[Document]) -> int:
        """Insert fully-formed records (id and created set) as-is. Returns count loaded.

        All-or-nothing: raises ValueError for an incomplete record and
        DuplicateDocumentError for an id already present, before inserting anything.
        """
        batch: dict[str, Document] = {}
        for doc in docs:
            if doc.id is None or doc.created is None:
                raise ValueError(f"Cannot load document without id and created: {doc.title!r}")
            if doc.id in batch:
                raise DuplicateDocumentError(doc.id)
            batch[doc.id] = doc

        with self._lock:
            for doc_id in batch:
                if doc_id in self._docs:
                    raise DuplicateDocumentError(doc_id)
            self._docs.update(batch)
        logger.debug("Loaded %d document(s)", len(batch))
        return len(batch)

    def _create(self, doc: Document) -> Document:
        doc_id = self.id_factory()
        if doc_id in self._docs:
            raise DuplicateDocumentError(doc_id)
        stored = Document(
            id=doc_id,
            title=doc.title,
            content=doc.content,
            author=doc.author,
            created=self.clock(),
        )
        self._docs[doc_id] = stored
        logger.debug("Created document %s", doc_id)
        return stored

    def _update(self, doc: Document) -> Document:
        stored = self._docs.get(doc.id)
        if stored is None:
            logger.warning("Update rejected: document %s not found", doc.id)
            raise DocumentNotFoundError(doc.id)

        changes = {
            name: getattr(doc, name)
            for name in _UPDATABLE
            if getattr(stored, name) != getattr(doc, name)
        }
        if not changes:
            return stored

        # Same key, so the record keeps its insertion position
        updated = stored.model_copy(update=changes)
        self._docs[doc.id] = updated
        logger.debug("Updated document %s: %s", doc.id, ", ".join(sorted(changes)))
        return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._docs

    def __iter__(self) -> Iterator[Document]:
        with self._lock:
            return iter(list(self._docs.values()))
