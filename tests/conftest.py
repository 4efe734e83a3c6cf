"""Pytest configuration and fixtures."""

import io
from pathlib import Path

import pytest

from linerev.streams import IoContext


class MemoryContext(IoContext):
    """An IoContext backed by in-memory byte streams."""

    def __init__(self, stdin: bytes = b""):
        super().__init__(io.BytesIO(stdin), io.BytesIO(), io.BytesIO())

    @property
    def output(self) -> str:
        return self.stdout.getvalue().decode("utf-8")

    @property
    def errors(self) -> list[str]:
        return self.stderr.getvalue().decode("utf-8").splitlines()


@pytest.fixture
def make_context():
    """Factory for in-memory contexts with the given standard input."""
    return MemoryContext


@pytest.fixture
def context() -> MemoryContext:
    """A context with empty standard input."""
    return MemoryContext()


@pytest.fixture
def write_file(tmp_path: Path):
    """Writes `content` to a file under tmp_path and returns its path as str."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return str(path)

    return _write


@pytest.fixture
def missing_path(tmp_path: Path):
    """Returns paths under tmp_path that do not exist."""

    def _missing(name: str) -> str:
        return str(tmp_path / name)

    return _missing
