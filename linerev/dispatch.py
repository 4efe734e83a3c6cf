"""
Read, reverse and write each requested source in turn.
"""

from linerev.reverse import reverse_lines
from linerev.sources import UnixPipe, open_source

EX_SUCCESS = 0
EX_FAILURE = 1


def feed(source, context):
    """Reverses the whole of `source` and writes it to the context's output."""
    text = source.read(context)
    context.write(reverse_lines(text) + source.trailer)


def run(paths, context) -> int:
    """
    Processes `paths` in order and returns the exit status.

    With no paths, standard input is processed once. A path that cannot be
    opened is reported and skipped; the status becomes that error's code, so
    the last failure wins. IoFailure is left to propagate.
    """
    if not paths:
        feed(UnixPipe(), context)
        return EX_SUCCESS

    exit_status = EX_SUCCESS
    for path in paths:
        try:
            source = open_source(path)
        except OSError as e:
            exit_status = e.errno or EX_FAILURE
            context.report(str(e))
            continue

        feed(source, context)

    return exit_status
