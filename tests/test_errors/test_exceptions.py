"""Tests for custom exception hierarchy."""

from refdocs.errors.exceptions import (
    CatalogError,
    RefDocsError,
    SourceError,
    UnknownDocumentError,
)
from refdocs.types import ErrorKind


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        assert issubclass(SourceError, RefDocsError)
        assert issubclass(UnknownDocumentError, RefDocsError)
        assert issubclass(CatalogError, RefDocsError)

    def test_all_inherit_from_exception(self):
        assert issubclass(RefDocsError, Exception)

    def test_unknown_document_is_key_error(self):
        assert issubclass(UnknownDocumentError, KeyError)


class TestSourceError:
    def test_attributes(self):
        original = PermissionError("denied")
        err = SourceError("Cannot read", kind=ErrorKind.TRANSIENT_IO, key="doc.md", original=original)
        assert err.kind is ErrorKind.TRANSIENT_IO
        assert err.key == "doc.md"
        assert err.original is original
        assert "Cannot read" in str(err)

    def test_defaults(self):
        err = SourceError("test")
        assert err.kind is ErrorKind.TRANSIENT_IO
        assert err.key is None
        assert err.original is None


class TestUnknownDocumentError:
    def test_message_is_not_repr_quoted(self):
        err = UnknownDocumentError("rust")
        assert str(err) == "Document 'rust' not found in catalog"
        assert err.name == "rust"


class TestCatalogError:
    def test_path(self):
        err = CatalogError("bad", path="/tmp/x.yaml")
        assert err.path == "/tmp/x.yaml"
        assert err.message == "bad"
