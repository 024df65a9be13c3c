"""Snapshot files: seed a store from YAML/JSON documents and render documents back to text"""

import json
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from docstore.core.models import Document
from docstore.crud.memory_repo import DocumentStore


def _read(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid {path}: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e


def parse_documents(data: Any, source: str = "<data>") -> list[Document]:
    """Validate raw snapshot data (a list, or a mapping with a 'documents' list).

    Raises ValueError naming source on structural or field errors.
    """
    if data is None:
        return []
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid {source}: expected a 'documents' list")
        data = data["documents"] or []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {source}: expected a list of documents")

    docs = []
    for i, raw in enumerate(data):
        try:
            doc = Document.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Invalid {source}: document #{i}: {e}") from e
        if doc.id is None or doc.created is None:
            raise ValueError(f"Invalid {source}: document #{i} needs both 'id' and 'created'")
        docs.append(doc)
    return docs


def load_snapshot(path: str | Path, store: DocumentStore | None = None) -> DocumentStore:
    """Read a snapshot file into store (a new one if omitted) and return the store."""
    path = Path(path)
    if not path.exists():
        raise ValueError(f"Snapshot file not found: {path}")
    store = store if store is not None else DocumentStore()
    store.load(parse_documents(_read(path), source=str(path)))
    return store


def render(docs: Iterable[Document], fmt: str = "json") -> str:
    """Serialize documents as a JSON array or a YAML list."""
    rows = [doc.model_dump(mode="json") for doc in docs]
    if fmt == "yaml":
        return yaml.safe_dump(rows, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(rows, indent=2, ensure_ascii=False)
    raise ValueError(f"Unsupported output format: {fmt}")
