"""Document catalog — discover, register, and look up document specs."""

from __future__ import annotations

import logging
from pathlib import Path

from refdocs.config.loader import load_catalog_yaml
from refdocs.errors.exceptions import CatalogError, UnknownDocumentError
from refdocs.types import DocumentInfo, DocumentSpec

logger = logging.getLogger(__name__)

BUILTIN_CATALOG = Path(__file__).parent / "builtin" / "documents.yaml"


class DocumentCatalog:
    """Stores document specs from the builtin catalog + user catalog files."""

    def __init__(self, user_files: list[Path] | None = None, include_builtin: bool = True) -> None:
        self._documents: dict[str, DocumentSpec] = {}
        self._sources: dict[str, bool] = {}  # name → is_builtin
        if include_builtin:
            # Broken builtin catalog is a packaging bug, let it raise
            for spec in load_catalog_yaml(BUILTIN_CATALOG):
                self.register(spec, builtin=True)
        for path in user_files or []:
            self._load(Path(path))

    def get(self, name: str) -> DocumentSpec:
        if name not in self._documents:
            raise UnknownDocumentError(name)
        return self._documents[name]

    def has(self, name: str) -> bool:
        return name in self._documents

    def names(self) -> list[str]:
        return list(self._documents)

    def all_specs(self) -> list[DocumentSpec]:
        return list(self._documents.values())

    def list_documents(self) -> list[DocumentInfo]:
        return [
            DocumentInfo(
                name=spec.name,
                tool_name=spec.resolved_tool_name,
                description=spec.description,
                source_key=spec.source_key,
                builtin=self._sources[spec.name],
            )
            for spec in self._documents.values()
        ]

    def register(self, spec: DocumentSpec, builtin: bool = False) -> None:
        self._documents[spec.name] = spec
        self._sources[spec.name] = builtin

    def _load(self, path: Path) -> None:
        try:
            specs = load_catalog_yaml(path)
        except (OSError, CatalogError) as e:
            logger.warning("Failed to load catalog %s: %s", path, e)
            return
        # User entries override builtins
        for spec in specs:
            self.register(spec, builtin=False)

    def __len__(self) -> int:
        return len(self._documents)
