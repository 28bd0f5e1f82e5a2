import asyncio

import pytest

from refdocs.errors.exceptions import SourceError
from refdocs.types import DocumentSpec, ErrorKind


class FakeSource:
    """In-memory document source with call counters and failure injection."""

    def __init__(self) -> None:
        self.documents: dict[str, tuple[str | bytes, int]] = {}
        self.read_failures: dict[str, BaseException] = {}
        self.version_failures: dict[str, BaseException] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.exists_calls = 0
        self.version_probes = 0
        self.reads = 0

    def put(self, key: str, content: str | bytes, version: int) -> None:
        self.documents[key] = (content, version)

    def hold(self, key: str) -> asyncio.Event:
        """Block read_all(key) until the returned event is set."""
        gate = asyncio.Event()
        self.gates[key] = gate
        return gate

    async def exists(self, key: str) -> bool:
        self.exists_calls += 1
        return key in self.documents

    async def get_version(self, key: str) -> int:
        self.version_probes += 1
        if key in self.version_failures:
            raise self.version_failures[key]
        if key not in self.documents:
            raise SourceError(f"missing {key}", kind=ErrorKind.NOT_FOUND, key=key)
        return self.documents[key][1]

    async def read_all(self, key: str) -> str | bytes:
        self.reads += 1
        gate = self.gates.get(key)
        if gate is not None:
            await gate.wait()
        if key in self.read_failures:
            raise self.read_failures[key]
        return self.documents[key][0]


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def doc_spec():
    return DocumentSpec(
        name="doc",
        tool_name="get_doc_best_practices",
        description="Test document",
        source_key="doc.md",
        fallback="# Doc\n- fallback",
    )


@pytest.fixture
def sample_catalog_yaml(tmp_path):
    """Write a minimal catalog YAML and return its path."""
    content = """
documents:
  - name: rust
    tool_name: get_rust_best_practices
    description: Retrieves Rust best practices
    source_key: rust-best-practices.md
    fallback: |-
      # Rust Best Practices
      - Prefer borrowing over cloning.
  - name: python
    description: Local Python guide
    source_key: local-python.md
    fallback: "# Local Python"
"""
    path = tmp_path / "catalog.yaml"
    path.write_text(content)
    return path


@pytest.fixture
def resources_dir(tmp_path):
    """A resources directory holding a python document only."""
    root = tmp_path / "resources"
    root.mkdir()
    (root / "python-best-practices.md").write_text("# Python (local copy)\n- Use pytest.\n")
    return root
