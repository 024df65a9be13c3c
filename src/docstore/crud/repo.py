from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.core.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Insert when doc.id is None, otherwise update the stored record with that id."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return stored documents matching request, in insertion order."""
        raise NotImplementedError
