##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Base class of the `paradox` commands.
"""

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace


class CommandEntryPoint(ABC):
    """
    One `paradox` command. Instances are listed in `ALL_COMMANDS`; the main
    parser asks each one to attach its subparser, and the parsed arguments
    carry the `process_command` of the command that was selected.

    Attributes:
        name (str): The word typed after `paradox` to select the command.

    Methods:
        register: Create the command's subparser and bind it to `process_command`.
        add_parser: Attach the command, its options and subcommands to the main parser.
        process_command: Run the command.
    """

    name: str = None

    def register(self, subparsers, **kwargs) -> ArgumentParser:
        """
        Create the subparser named after the command and make it dispatch here.

        Args:
            subparsers: The action returned by `add_subparsers` on the main parser.
            **kwargs: Passed on to `add_parser`, e.g. `help`.

        Returns:
            The new subparser.
        """
        parser = subparsers.add_parser(self.name, **kwargs)
        parser.set_defaults(func=self.process_command)
        return parser

    @abstractmethod
    def add_parser(self, subparsers):
        """Attach the command to the main parser, normally through `register`."""
        raise NotImplementedError(f"{type(self).__name__} must implement `add_parser`.")

    @abstractmethod
    def process_command(self, args: Namespace):
        """Run the command with the parsed arguments."""
        raise NotImplementedError(f"{type(self).__name__} must implement `process_command`.")
