"""Store error types"""


class DocumentNotFoundError(LookupError):
    """Raised when an update targets an id the store does not hold."""

    def __init__(self, doc_id: str):
        super().__init__(f"Document {doc_id} not found")
        self.doc_id = doc_id


class DuplicateDocumentError(ValueError):
    """Raised when a record would be stored under an id that is already taken."""

    def __init__(self, doc_id: str):
        super().__init__(f"Document {doc_id} already exists")
        self.doc_id = doc_id
