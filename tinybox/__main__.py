"""Command-line interface to tinybox."""

import argparse
import sys

from . import DEFAULT_OPTIONS, HTML, __version__
from .logger import configure_stream_logging

PARSER = argparse.ArgumentParser(
    prog='tinybox', description='Lay out and paint HTML documents to PNG.')
PARSER.add_argument(
    'input', help='filename of the HTML input, or - for stdin')
PARSER.add_argument(
    'output', help='filename where the PNG output is written, or - for stdout')
PARSER.add_argument(
    '-s', '--stylesheet', action='append', dest='stylesheets',
    help='filename for a user CSS stylesheet')
PARSER.add_argument(
    '-W', '--width', type=int, help='width of the viewport in pixels')
PARSER.add_argument(
    '-H', '--height', type=int, help='height of the viewport in pixels')
PARSER.add_argument(
    '-v', '--verbose', action='store_true',
    help='show warnings and information messages')
PARSER.add_argument(
    '-d', '--debug', action='store_true', help='show debugging messages')
PARSER.add_argument(
    '-q', '--quiet', action='store_true', help='hide logging messages')
PARSER.add_argument(
    '--version', action='version',
    version=f'tinybox version {__version__}',
    help='print tinybox’s version number and exit')
PARSER.set_defaults(**DEFAULT_OPTIONS)


def main(argv=None, stdout=None, stdin=None, HTML=HTML):  # noqa: N803
    """The ``tinybox`` program takes at least two arguments:

    .. code-block:: sh

        tinybox [options] <input> <output>

    """
    args = PARSER.parse_args(argv)
    if args.input == '-':
        source = stdin or sys.stdin.buffer
    else:
        source = args.input
    if args.output == '-':
        output = stdout or sys.stdout.buffer
    else:
        output = args.output
    options = {
        key: value for key, value in vars(args).items() if key in DEFAULT_OPTIONS}

    # Default to logging to stderr.
    configure_stream_logging(args.debug, args.verbose, args.quiet)

    html = HTML(source)
    html.write_png(output, **options)


if __name__ == '__main__':  # pragma: no cover
    main()
