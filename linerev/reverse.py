"""
Character reversal within lines.

The order of lines is never changed; only the characters inside each line are
reversed. Work is done on decoded text, so a multi-byte character is moved as a
whole rather than byte by byte.
"""

TERMINATOR = '\n'


def complete_segments(segments: list) -> list:
    """
    Returns the segments that make it into the output.

    The final segment is always discarded. When the text ends with a
    terminator that segment is empty, and dropping it removes the trailing
    terminator. When it does not, the unterminated last line is lost.
    """
    return segments[:-1]


def reverse_lines(text: str) -> str:
    """Reverses the characters of each line of `text`."""
    segments = [segment[::-1] for segment in text.split(TERMINATOR)]
    return TERMINATOR.join(complete_segments(segments))
