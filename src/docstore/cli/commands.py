"""CLI command implementations"""

import logging
from datetime import datetime
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.models import SearchRequest
from docstore.crud.memory_repo import DocumentStore
from docstore.crud.snapshot import load_snapshot, render


FileOpt = Annotated[Optional[str], typer.Option("--file", "-f", help="Snapshot file (YAML or JSON)")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", help="Output format: json or yaml")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply its log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _store(settings: Settings) -> DocumentStore:
    try:
        return load_snapshot(settings.snapshot_file)
    except (OSError, ValueError) as e:
        _fail(f"Could not load {settings.snapshot_file}", e)


def _timestamp(value: Optional[str], flag: str) -> Optional[datetime]:
    """Parse an ISO-8601 option value."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        _fail(f"{flag} expects an ISO-8601 timestamp, got {value!r}")


def search_cmd(
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", "-t", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", "-c", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", "-a", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--from", help="Created strictly after (ISO-8601)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--to", help="Created strictly before (ISO-8601)")] = None,
    file: FileOpt = None,
    fmt: FormatOpt = None,
    ):
    """Print documents matching every given filter, in stored order."""
    settings = _settings(overrides={"snapshot_file": file, "output_format": fmt})
    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=contains or None,
        author_ids=author or None,
        created_from=_timestamp(created_from, "--from"),
        created_to=_timestamp(created_to, "--to"),
    )
    store = _store(settings)
    typer.echo(render(store.search(request), settings.output_format))


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    file: FileOpt = None,
    fmt: FormatOpt = None,
    ):
    """Print a single document by id."""
    settings = _settings(overrides={"snapshot_file": file, "output_format": fmt})
    doc = _store(settings).find_by_id(doc_id)
    if doc is None:
        _fail(f"Document {doc_id} not found in {settings.snapshot_file}")
    typer.echo(render([doc], settings.output_format))


def validate_cmd(file: FileOpt = None):
    """Check that a snapshot file loads cleanly and report its size."""
    settings = _settings(overrides={"snapshot_file": file})
    store = _store(settings)
    typer.echo(f"{settings.snapshot_file}: {len(store)} document(s) OK")
