##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
CLI module for collection administration.
"""

import logging
from argparse import ArgumentParser, Namespace

from paradox.cli.commands.command_entry_point import CommandEntryPoint
from paradox.cli.utils import add_connection_arguments, open_toolbox


LOG = logging.getLogger("paradox")


class CollectionCommand(CommandEntryPoint):
    """
    Handles the `collection` command.

    Methods:
        add_parser: Adds the `collection` command and its subcommands to the CLI parser.
        process_command: Dispatches to the selected subcommand.
    """

    name = "collection"

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `collection` command parser to the CLI argument parser.

        Args:
            subparsers: The subparsers object to which the `collection` command parser will be added.
        """
        collection = self.register(subparsers, help="List, create, count and drop collections.")
        collection_commands = collection.add_subparsers(dest="collection_command", required=True)

        coll_list = collection_commands.add_parser("list", help="List the collections of the database.")
        coll_list.add_argument("--system", action="store_true", help="Include system collections.")
        add_connection_arguments(coll_list)

        coll_create = collection_commands.add_parser("create", help="Create a collection.")
        coll_create.add_argument("name", type=str, help="The collection name.")
        coll_create.add_argument("--edge", action="store_true", help="Create an edge collection.")
        add_connection_arguments(coll_create)

        for name, help_text in (("count", "Count the documents in a collection."), ("drop", "Drop a collection.")):
            subcommand = collection_commands.add_parser(name, help=help_text)
            subcommand.add_argument("name", type=str, help="The collection name.")
            add_connection_arguments(subcommand)

    def process_command(self, args: Namespace):
        """
        Run the selected `collection` subcommand.

        Args:
            args: Parsed CLI arguments.
        """
        manager = open_toolbox(args).get_collection_manager()
        if args.collection_command == "list":
            for name in manager.list_collections(include_system=args.system):
                print(name)
        elif args.collection_command == "create":
            manager.create_collection(args.name, edge=args.edge)
        elif args.collection_command == "count":
            print(manager.count(args.name))
        elif args.collection_command == "drop":
            manager.delete_collection(args.name)
