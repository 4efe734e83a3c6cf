"""
The process streams shared by every source processed in one run.
"""

import sys

ENCODING = 'utf-8'


class IoFailure(Exception):
    """
    A source could not be read or decoded, or the output could not be written.

    This is not recoverable; it aborts the whole run.
    """
    def __init__(self, operation, error):
        super().__init__(f"cannot {operation}: {error}")
        self.operation = operation
        self.error = error


class IoContext:
    """
    Holds the standard input, output and error streams for the run.

    One instance is created at start-up and handed to every dispatch, so all
    sources write to the same output stream in the order they are processed.
    All three streams are binary; text is encoded and decoded here.
    """
    def __init__(self, stdin, stdout, stderr):
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr

    @classmethod
    def from_process(cls):
        """Binds the context to this process's standard streams."""
        return cls(sys.stdin.buffer, sys.stdout.buffer, sys.stderr.buffer)

    def write(self, text: str):
        """Writes `text` to the output stream."""
        try:
            self.stdout.write(text.encode(ENCODING))
            self.stdout.flush()
        except OSError as e:
            raise IoFailure("write to standard output", e) from e

    def report(self, message: str):
        """Writes one diagnostic line to the error stream, unbuffered."""
        self.stderr.write(f"{message}\n".encode(ENCODING, errors='replace'))
        self.stderr.flush()


def read_all(stream, name: str) -> str:
    """Reads `stream` to the end and decodes it as text."""
    try:
        data = stream.read()
    except OSError as e:
        raise IoFailure(f"read from {name}", e) from e

    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise IoFailure(f"decode {name}", e) from e
