"""YAML catalog loading and validation."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from refdocs.errors.exceptions import CatalogError
from refdocs.types import DocumentSpec


def load_catalog_yaml(path: str | Path) -> list[DocumentSpec]:
    """Load a catalog YAML file and return its validated document specs."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog YAML not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict) or "documents" not in raw:
        raise CatalogError(
            f"Invalid catalog YAML: missing top-level 'documents' key in {path}", path=str(path)
        )
    if not isinstance(raw["documents"], list):
        raise CatalogError(f"Invalid catalog YAML: 'documents' must be a list in {path}", path=str(path))

    try:
        return [DocumentSpec(**item) for item in raw["documents"]]
    except (TypeError, ValidationError) as e:
        raise CatalogError(f"Invalid document entry in {path}: {e}", path=str(path)) from e
