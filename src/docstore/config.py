"""Settings schema and its layered loader: config file, environment, CLI"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    app_name:      str = "docstore"
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                               description="Root logging level for the CLI")
    snapshot_file: str = Field(default="documents.yaml", description="YAML/JSON file of documents to seed the store")
    output_format: str = Field(default="json", pattern="^(json|yaml)$", description="json or yaml")


def _file_layer(path: Path) -> dict[str, Any]:
    """Top-level mapping of a YAML config file; empty when the file is absent."""
    if not path.is_file():
        return {}
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")
    return loaded


def _env_layer() -> dict[str, str]:
    """Non-empty DOCSTORE_<FIELD> variables keyed by field name."""
    found = {name: os.environ.get(ENV_PREFIX + name.upper()) for name in Settings.model_fields}
    return {name: value for name, value in found.items() if value}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings; later layers win: config file < env vars < non-None overrides.

    The config file is DOCSTORE_CONFIG if set, else ./config.yaml.
    """
    path = Path(os.environ.get(f"{ENV_PREFIX}CONFIG") or CONFIG_FILE)
    merged = {**_file_layer(path), **_env_layer()}
    merged.update((k, v) for k, v in (overrides or {}).items() if v is not None)
    return Settings(**merged)
