"""
linerev: reverse the characters of every line of a file or of standard input.
"""

from linerev.reverse import TERMINATOR, reverse_lines
from linerev.streams import IoContext, IoFailure
from linerev.sources import FileStream, Source, UnixPipe, open_source
from linerev.dispatch import feed, run

VERSION = '1.0'

__all__ = [
    'TERMINATOR',
    'VERSION',
    'FileStream',
    'IoContext',
    'IoFailure',
    'Source',
    'UnixPipe',
    'feed',
    'open_source',
    'reverse_lines',
    'run',
]
