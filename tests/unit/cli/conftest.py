##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Fixtures for files in this `cli/` test directory.
"""

from argparse import ArgumentParser

import pytest
import yaml

from paradox.cli.commands.command_entry_point import CommandEntryPoint
from tests.fixture_types import FixtureCallable, FixtureStr


@pytest.fixture
def create_parser() -> FixtureCallable:
    """
    A fixture to help create a parser for any command.

    Returns:
        A function that creates a parser.
    """

    def _create_parser(cmd: CommandEntryPoint) -> ArgumentParser:
        """
        Returns an `ArgumentParser` configured with the `cmd` command and its subcommands.

        Returns:
            Parser with the `cmd` command and its subcommands registered.
        """
        parser = ArgumentParser()
        subparsers = parser.add_subparsers(dest="main_command")
        cmd.add_parser(subparsers)
        return parser

    return _create_parser


@pytest.fixture
def cli_config_file(tmp_path, endpoint: str) -> FixtureStr:
    """
    A configuration file with a document connection and a graph connection.

    Args:
        tmp_path: Temporary directory provided by pytest.
        endpoint: The server address.

    Returns:
        The path to the configuration file.
    """
    path = tmp_path / "paradox.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "default": "main",
                "connections": {
                    "main": {"endpoint": endpoint, "username": "root", "password": "secret", "database": "app"},
                    "social": {"endpoint": endpoint, "graph": "social"},
                },
            }
        )
    )
    return str(path)
