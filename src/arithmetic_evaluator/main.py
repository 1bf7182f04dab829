"""
Command-line entrypoint of the arithmetic evaluator.

This script:
- Reads expressions from a file, an archive or standard input
- Evaluates each line independently
- Prints each result (or error) preceded by a blank line
"""

import argparse
from typing import List, Literal, Optional

from pydantic import BaseModel, FilePath, ValidationError

from arithmetic_evaluator.common.logger import configure_logging
from arithmetic_evaluator.console.console import ExpressionConsole
from arithmetic_evaluator.console.source import ExpressionSource


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : Optional[FilePath]
        Path to the file containing arithmetic expressions, stdin when omitted.
    legacy_braces : bool
        Ignore parentheses instead of grouping with them.
    log_level : LogLevel
        Verbosity of the log records written to stderr.
    """

    file_path: Optional[FilePath] = None
    legacy_braces: bool = False
    log_level: LogLevel = "WARNING"


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="arithmetic-evaluator",
        description="Evaluate one arithmetic expression per input line",
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        default=None,
        help="Path to a .txt file or .zip/.tar.xz/.7z archive of expressions (default: stdin)",
    )
    parser.add_argument(
        "--legacy-braces",
        action="store_true",
        help="Accept parentheses but ignore them, like the legacy calculator",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Log level for messages on stderr (default: WARNING)",
    )
    return parser


def parse_args(
    argv: Optional[List[str]] = None, parser: Optional[argparse.ArgumentParser] = None
) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``
    :param parser: Parser to use, a new one from ``build_parser`` when omitted
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = parser if parser is not None else build_parser()
    args = parser.parse_args(argv)

    try:
        return CliArgs(
            file_path=args.file_path,
            legacy_braces=args.legacy_braces,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the console driver until the input ends.

    An unreadable input (unsupported format, archive without a .txt member)
    is reported through the parser and exits with status 2.
    """
    parser = build_parser()
    cli_args = parse_args(argv, parser)
    configure_logging(cli_args.log_level)

    source = ExpressionSource(path=cli_args.file_path)
    console = ExpressionConsole(legacy_braces=cli_args.legacy_braces)
    try:
        console.run(source.requests())
    except ValueError as exc:
        # Evaluation errors are handled per line by the console, this is the input itself
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
