##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
CLI module for showing details of the server behind a connection.
"""

import logging
from argparse import ArgumentParser, Namespace

from paradox.cli.commands.command_entry_point import CommandEntryPoint
from paradox.cli.utils import add_connection_arguments, open_toolbox


LOG = logging.getLogger("paradox")


class InfoCommand(CommandEntryPoint):
    """
    Handles the `info` command.

    Methods:
        add_parser: Adds the `info` command to the CLI parser.
        process_command: Prints the server version and the toolbox settings.
    """

    name = "info"

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `info` command parser to the CLI argument parser.

        Args:
            subparsers: The subparsers object to which the `info` command parser will be added.
        """
        info = self.register(
            subparsers,
            help="Show the server version and the settings of a connection. Useful for debugging.",
        )
        add_connection_arguments(info)

    def process_command(self, args: Namespace):
        """
        Print the server version and the toolbox settings.

        Args:
            args: Parsed CLI arguments.
        """
        toolbox = open_toolbox(args)
        server = toolbox.get_server()
        print(f"endpoint: {toolbox.get_endpoint()}")
        print(f"database: {toolbox.get_database()}")
        print(f"graph: {toolbox.get_graph() if toolbox.is_graph() else '(document mode)'}")
        print(f"server version: {server.get_version()}")
