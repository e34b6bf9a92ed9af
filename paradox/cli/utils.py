##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Helpers shared by the CLI commands.
"""

import logging
from argparse import ArgumentParser, Namespace

from paradox.paradox import Paradox
from paradox.toolbox import Toolbox


LOG = logging.getLogger("paradox")


def add_connection_arguments(parser: ArgumentParser):
    """
    Add the options that select a configured connection.

    Args:
        parser: The parser of a command.
    """
    parser.add_argument(
        "--config",
        dest="config_path",
        type=str,
        default=None,
        help="Path to a paradox.yaml file or the directory holding one. "
        "Defaults to the current directory, then $PARADOX_HOME.",
    )
    parser.add_argument(
        "-c",
        "--connection",
        type=str,
        default=None,
        help="Name of the connection to use. Defaults to the configured default.",
    )


def open_toolbox(args: Namespace) -> Toolbox:
    """
    Build the toolbox of the connection selected on the command line.

    Args:
        args: Parsed CLI arguments carrying `config_path` and `connection`.

    Returns:
        The toolbox.
    """
    paradox = Paradox()
    paradox.load_config(args.config_path)
    toolbox = paradox.get_toolbox(args.connection)
    LOG.debug(f"Using {toolbox!r}.")
    return toolbox
