##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
CLI module for database administration.

The `database` command has three subcommands:

    paradox database list
    paradox database create <name>
    paradox database delete <name>
"""

import logging
from argparse import ArgumentParser, Namespace

from paradox.cli.commands.command_entry_point import CommandEntryPoint
from paradox.cli.utils import add_connection_arguments, open_toolbox


LOG = logging.getLogger("paradox")


class DatabaseCommand(CommandEntryPoint):
    """
    Handles the `database` command.

    Methods:
        add_parser: Adds the `database` command and its subcommands to the CLI parser.
        process_command: Dispatches to the selected subcommand.
    """

    name = "database"

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `database` command parser to the CLI argument parser.

        Args:
            subparsers: The subparsers object to which the `database` command parser will be added.
        """
        database = self.register(subparsers, help="List, create and delete databases.")
        database_commands = database.add_subparsers(dest="database_command", required=True)

        db_list = database_commands.add_parser("list", help="List the databases on the server.")
        add_connection_arguments(db_list)

        for name, help_text in (("create", "Create a database."), ("delete", "Delete a database.")):
            subcommand = database_commands.add_parser(name, help=help_text)
            subcommand.add_argument("name", type=str, help="The database name.")
            add_connection_arguments(subcommand)

    def process_command(self, args: Namespace):
        """
        Run the selected `database` subcommand.

        Args:
            args: Parsed CLI arguments.
        """
        manager = open_toolbox(args).get_database_manager()
        if args.database_command == "list":
            for name in manager.list_databases():
                print(name)
        elif args.database_command == "create":
            manager.create_database(args.name)
        elif args.database_command == "delete":
            manager.delete_database(args.name)
