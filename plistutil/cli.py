"""Command-line interface for plistutil.

WHY: The converter is used as a filter in shell pipelines and build
scripts: one document in, one document out, and an exit status that says
what went wrong. The CLI wires the pipeline stages together behind the
classic plistutil flags.

HOW: argparse parses -i/-o/-f/-d/-h/-v. A parser subclass turns argparse
errors into UsageError instead of exiting, so a malformed command line
prints usage and exits 0 just like --help. main() then reads the input,
converts it, writes the result, and translates the stage results into
the exit status. Diagnostics go to stderr; converted bytes to stdout or
the output file.

RULES:
- -i/-o default to stdin/stdout; "-" selects them explicitly
- -f accepts values starting with bin, xml or json; omitted means auto
- Missing option argument, bad -f value, unknown flag or -h: usage, exit 0
- -v prints "plistutil <version>" and exits 0 without converting
- -d turns on DEBUG logging to stderr
- Input, output and usage failures are reported as "ERROR: <message>"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from plistutil import __version__
from plistutil.config import LOG_FORMAT, LOG_LEVEL, PACKAGE_BUGREPORT, PACKAGE_URL
from plistutil.core.acquire import read_input
from plistutil.core.dispatcher import convert
from plistutil.core.ir import FormatSelector
from plistutil.core.outcome import translate
from plistutil.core.output import write_output
from plistutil.errors import PlistUtilError, UsageError

logger = logging.getLogger(__name__)

_USAGE = """\
Usage: {prog} [OPTIONS] [-i FILE] [-o FILE]

Convert a plist FILE between binary, XML, and JSON format.
If -f is omitted, XML plist data will be converted to binary and vice-versa.
To convert to/from JSON the output format needs to be specified.

OPTIONS:
  -i, --infile FILE    Optional FILE to convert from or stdin if - or not used
  -o, --outfile FILE   Optional FILE to convert to or stdout if - or not used
  -f, --format FORMAT  Force output format, regardless of input type
                       FORMAT is one of xml, bin, or json
                       If omitted XML will be converted to binary,
                       and binary to XML.
  -d, --debug          Enable extended debug output
  -v, --version        Print version information

Homepage:    <{url}>
Bug Reports: <{bugreport}>
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _error(msg: str) -> None:
    """Print a diagnostic to stderr.

    RULES:
    - Never written to stdout, so redirected output stays clean
    - Always flush after writing
    """
    print("ERROR: {}".format(msg), file=sys.stderr, flush=True)


def _format_type(value: str) -> FormatSelector:
    try:
        return FormatSelector.from_argument(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def print_usage(prog: str = "plistutil") -> None:
    """Print the usage text to stdout."""
    sys.stdout.write(_USAGE.format(prog=prog, url=PACKAGE_URL, bugreport=PACKAGE_BUGREPORT))
    sys.stdout.flush()


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running a conversion.

    RULES:
    - add_help is off: -h is handled by main() so it shares the usage path
    - -v is a plain flag so a bad argument or -h elsewhere still wins
    - allow_abbrev is off: long options must be spelled in full
    """
    parser = _ArgumentParser(prog="plistutil", add_help=False, allow_abbrev=False)

    parser.add_argument(
        "-i", "--infile",
        default=None,
        help="Input file, or - for stdin (default: stdin).",
    )
    parser.add_argument(
        "-o", "--outfile",
        default=None,
        help="Output file, or - for stdout (default: stdout).",
    )
    parser.add_argument(
        "-f", "--format",
        dest="output_format",
        type=_format_type,
        default=FormatSelector.AUTO,
        help="Force output format: bin, xml or json.",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable extended debug output.",
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Print usage and exit.",
    )
    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="Print version information and exit.",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Send log records to stderr at DEBUG or the configured level."""
    if debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(LOG_LEVEL)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("plistutil").setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Returns the process exit status instead of calling sys.exit(),
      for -h and -v too
    - -h wins over -v; a malformed command line wins over both
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        _error(str(exc))
        print_usage(parser.prog)
        return exc.exit_code

    if args.help:
        print_usage(parser.prog)
        return 0
    if args.version:
        print("plistutil {}".format(__version__), flush=True)
        return 0

    configure_logging(args.debug)
    logger.debug("Input: %s, output: %s, format: %s",
                 args.infile or "stdin", args.outfile or "stdout", args.output_format.value)

    try:
        payload = read_input(args.infile)
        result = convert(payload, args.output_format)
        write_output(result.rendered, args.outfile)
    except PlistUtilError as exc:
        _error(str(exc))
        return exc.exit_code

    exit_code, message = translate(result.outcome)
    if message:
        _error(message)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
