from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from i18nstore.errors import DocumentIOError, DocumentParseError
from i18nstore.utils.yaml_io import from_yaml

YAML_SUFFIXES = {".yaml", ".yml"}


def _read_text(path: Path) -> str:
    try:
        with path.open("rb") as f:
            raw = f.read()
    except OSError as e:
        raise DocumentIOError(f"Could not open file: {path}") from e

    if not raw:
        raise DocumentIOError(f"File is empty: {path}")

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Invalid document in file: {path}\n{e}") from e


def load_document(path: str | Path) -> Any:
    """
    Read and parse a translation document from disk.

    JSON by default; `.yaml` / `.yml` files go through PyYAML's safe loader.
    The returned value is not validated here (see core.validation).
    """
    p = Path(path)
    text = _read_text(p)

    if p.suffix.lower() in YAML_SUFFIXES:
        try:
            return from_yaml(text)
        except yaml.YAMLError as e:
            raise DocumentParseError(f"Invalid YAML in file: {p}\n{e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"Invalid JSON in file: {p}\n{e}") from e
