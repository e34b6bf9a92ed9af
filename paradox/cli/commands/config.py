##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
CLI module for showing the Paradox configuration.
"""

import logging
from argparse import ArgumentParser, Namespace

from paradox.cli.commands.command_entry_point import CommandEntryPoint
from paradox.config.configfile import load_config


LOG = logging.getLogger("paradox")


class ConfigCommand(CommandEntryPoint):
    """
    Handles the `config` command, which prints the configuration with passwords hidden.

    Methods:
        add_parser: Adds the `config` command to the CLI parser.
        process_command: Loads and prints the configuration.
    """

    name = "config"

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `config` command parser to the CLI argument parser.

        Args:
            subparsers: The subparsers object to which the `config` command parser will be added.
        """
        config = self.register(subparsers, help="Show the connections defined in paradox.yaml.")
        config.add_argument(
            "--config",
            dest="config_path",
            type=str,
            default=None,
            help="Path to a paradox.yaml file or the directory holding one.",
        )

    def process_command(self, args: Namespace):
        """
        Load and print the configuration.

        Args:
            args: Parsed CLI arguments.
        """
        print(load_config(args.config_path))
