"""
The places text can come from: standard input, or a file opened for reading.
"""

from linerev.reverse import TERMINATOR
from linerev.streams import read_all


class Source:
    """
    One origin of text for a single dispatch.

    `trailer` is appended after the reversed text when it is written out.
    """
    trailer = ''

    def read(self, context) -> str:
        raise NotImplementedError


class UnixPipe(Source):
    """Standard input, used when no paths are given."""
    trailer = TERMINATOR

    def read(self, context) -> str:
        return read_all(context.stdin, "standard input")


class FileStream(Source):
    """A file that has already been opened; it is closed once read."""

    def __init__(self, handle, name=None):
        self.handle = handle
        self.name = name or getattr(handle, 'name', '<file>')

    def read(self, context) -> str:
        with self.handle:
            return read_all(self.handle, f"'{self.name}'")


def open_source(path) -> FileStream:
    """
    Opens `path` strictly for reading.

    The file must already exist; it is never created, truncated or appended
    to. Raises OSError when the open fails.
    """
    # 'rb' maps to O_RDONLY: no O_CREAT, O_TRUNC or O_APPEND.
    handle = open(path, 'rb')
    return FileStream(handle, name=path)
