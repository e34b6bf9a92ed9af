##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Top-level parser of the `paradox` command.

Options that apply to every command (log level, colors) are parsed here. Each
command registers its own subparser and its connection options through
`ALL_COMMANDS`.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from paradox import VERSION
from paradox.cli.commands import ALL_COMMANDS


DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DESCRIPTION = """\
Paradox: an object document mapper for ArangoDB.

Inspect and administer the connections defined in paradox.yaml.
"""


class HelpParser(ArgumentParser):
    """
    `ArgumentParser` that shows the full usage after a parsing error, so a
    mistyped command lists the commands that do exist.

    Methods:
        error: Report the error, print the help and exit with status 2.
    """

    def error(self, message: str):
        """
        Report a parsing error on stderr and the help on stdout, then exit with status 2.

        Args:
            message: The message produced by argparse.
        """
        sys.stderr.write(f"error: {message}\n")
        self.print_help()
        sys.exit(2)


def build_main_parser() -> ArgumentParser:
    """
    Build the `paradox` parser with every command of `ALL_COMMANDS` attached.

    Returns:
        The parser. Parsed arguments carry `level` (upper case), `no_color` and
        the `func` of the selected command.
    """
    parser = HelpParser(
        prog="paradox",
        description=DESCRIPTION,
        formatter_class=RawDescriptionHelpFormatter,
        epilog="Run 'paradox <command> --help' for the options of a command.",
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    parser.add_argument(
        "-lvl",
        "--level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        metavar="LEVEL",
        help=f"Log level, one of {', '.join(LOG_LEVELS)} [Default: %(default)s]",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print plain log lines instead of colored ones.",
    )
    subparsers = parser.add_subparsers(dest="subparsers", metavar="<command>", required=True)

    for command in ALL_COMMANDS:
        command.add_parser(subparsers)

    return parser
