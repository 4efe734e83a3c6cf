#!/usr/bin/env python3
"""
Name: linerev
Description: reverse the characters of every line of a file
License: perl
"""

import sys
import os
import argparse

from linerev import VERSION
from linerev.dispatch import EX_FAILURE, run
from linerev.streams import IoContext, IoFailure

EX_INTERRUPTED = 130


def build_parser():
    parser = argparse.ArgumentParser(
        description="Reverse the order of characters in every line of a file.",
        usage="%(prog)s [file ...]"
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )
    parser.add_argument(
        'files',
        nargs='*', # Zero or more file arguments.
        help='Files to process, in order. Reads from stdin if none are given.'
    )
    return parser


def main(argv=None):
    """Parses arguments and runs the line-reversing logic."""
    args = build_parser().parse_args(argv)
    program_name = os.path.basename(sys.argv[0])

    # The streams are bound once here and shared by every file processed.
    context = IoContext.from_process()

    try:
        exit_status = run(args.files, context)
    except IoFailure as e:
        context.report(f"{program_name}: {e}")
        exit_status = EX_FAILURE
    except KeyboardInterrupt:
        exit_status = EX_INTERRUPTED

    sys.exit(exit_status)


if __name__ == "__main__":
    main()
