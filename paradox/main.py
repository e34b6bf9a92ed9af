##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
The `paradox` console script.
"""

import logging
import sys
import traceback
from typing import List

from paradox.cli.argparse_main import build_main_parser
from paradox.exceptions import ToolboxError
from paradox.log_formatter import setup_logging


LOG = logging.getLogger("paradox")


def main(argv: List[str] = None) -> int:
    """
    Run one `paradox` command.

    Failures of the toolbox and its components, and configuration problems,
    are reported as a single error line. Anything else is reported with its
    type so it can be told apart from a refused operation. Both exit with
    status 1; the traceback is logged at debug level.

    Args:
        argv: The arguments after the program name. Defaults to `sys.argv[1:]`.

    Returns:
        1 when no command was given. Otherwise the process exits through `sys.exit`.
    """
    argv = sys.argv[1:] if argv is None else argv
    parser = build_main_parser()
    if not argv:
        parser.print_help(sys.stdout)
        return 1
    args = parser.parse_args(argv)

    setup_logging(logger=LOG, log_level=args.level, colors=not args.no_color)

    try:
        args.func(args)
    except (ToolboxError, ValueError, FileNotFoundError) as excpt:
        LOG.debug(traceback.format_exc())
        LOG.error(str(excpt))
        sys.exit(1)
    # Last resort for the console script
    except Exception as excpt:  # pylint: disable=broad-except
        LOG.debug(traceback.format_exc())
        LOG.error(f"Unexpected {type(excpt).__name__}: {excpt}")
        sys.exit(1)

    sys.exit()


if __name__ == "__main__":
    main()
