"""Filesystem-backed document source."""

from __future__ import annotations

import asyncio
import logging
import stat
from pathlib import Path

from refdocs.errors.classify import to_source_error
from refdocs.errors.exceptions import SourceError
from refdocs.types import ErrorKind

logger = logging.getLogger(__name__)

BUILTIN_RESOURCES_DIR = Path(__file__).parent.parent / "catalog" / "builtin" / "resources"


class FileSystemSource:
    """Serves documents from files under a root directory.

    Keys are paths relative to the root. The version token is the file's
    `st_mtime_ns`. All filesystem calls, path resolution included, run in a
    worker thread so the event loop (and cancellation) stays responsive.
    """

    def __init__(self, root: str | Path | None = None, encoding: str = "utf-8") -> None:
        self._root = Path(root) if root else BUILTIN_RESOURCES_DIR
        self._encoding = encoding

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, key: str) -> Path:
        """Resolve a key to a path, refusing anything outside the root.

        Touches the filesystem; call it from a worker thread.
        """
        root = self._root.resolve()
        path = (root / key).resolve()
        if not path.is_relative_to(root):
            raise SourceError(
                f"Key escapes source root: {key}",
                kind=ErrorKind.TRANSIENT_IO,
                key=key,
                original=PermissionError(key),
            )
        return path

    async def exists(self, key: str) -> bool:
        return await asyncio.to_thread(self._exists, key)

    async def get_version(self, key: str) -> int:
        return await asyncio.to_thread(self._get_version, key)

    async def read_all(self, key: str) -> str:
        return await asyncio.to_thread(self._read_all, key)

    def _exists(self, key: str) -> bool:
        try:
            st = self.resolve(key).stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as exc:
            raise to_source_error(exc, key) from exc
        return stat.S_ISREG(st.st_mode)

    def _get_version(self, key: str) -> int:
        try:
            return self.resolve(key).stat().st_mtime_ns
        except OSError as exc:
            raise to_source_error(exc, key) from exc

    def _read_all(self, key: str) -> str:
        try:
            path = self.resolve(key)
            logger.debug("Reading %s", path)
            return path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise to_source_error(exc, key) from exc
