##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Tests for the `collection.py` file of the `cli/commands/` folder.
"""

from argparse import Namespace
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from paradox.cli.commands.collection import CollectionCommand
from tests.fixture_types import FixtureCallable


@pytest.fixture
def collection_manager(mocker: MockerFixture) -> MagicMock:
    """
    Patch `open_toolbox` so the command works on a mocked collection manager.

    Args:
        mocker: Used to patch `open_toolbox`.

    Returns:
        The mocked collection manager.
    """
    toolbox = mocker.patch("paradox.cli.commands.collection.open_toolbox").return_value
    return toolbox.get_collection_manager.return_value


def test_collection_parser(create_parser: FixtureCallable):
    """
    Ensure the `collection` subcommands parse their options.

    Args:
        create_parser: Builds a parser holding a single command.
    """
    command = CollectionCommand()
    parser = create_parser(command)

    args = parser.parse_args(["collection", "list", "--system"])
    assert args.func.__name__ == command.process_command.__name__
    assert args.system is True

    args = parser.parse_args(["collection", "create", "knows", "--edge"])
    assert (args.collection_command, args.name, args.edge) == ("create", "knows", True)


def test_collection_list(collection_manager: MagicMock, capsys):
    """
    Ensure collection names are printed one per line.

    Args:
        collection_manager: The mocked collection manager.
        capsys: Used to capture stdout.
    """
    collection_manager.list_collections.return_value = ["users", "knows"]
    CollectionCommand().process_command(
        Namespace(collection_command="list", system=False, config_path=None, connection=None)
    )
    collection_manager.list_collections.assert_called_once_with(include_system=False)
    assert capsys.readouterr().out == "users\nknows\n"


def test_collection_create(collection_manager: MagicMock):
    """
    Ensure `create` passes the edge flag through.

    Args:
        collection_manager: The mocked collection manager.
    """
    CollectionCommand().process_command(
        Namespace(collection_command="create", name="knows", edge=True, config_path=None, connection=None)
    )
    collection_manager.create_collection.assert_called_once_with("knows", edge=True)


def test_collection_count_and_drop(collection_manager: MagicMock, capsys):
    """
    Ensure `count` prints the count and `drop` deletes the collection.

    Args:
        collection_manager: The mocked collection manager.
        capsys: Used to capture stdout.
    """
    collection_manager.count.return_value = 7
    command = CollectionCommand()

    command.process_command(Namespace(collection_command="count", name="users", config_path=None, connection=None))
    command.process_command(Namespace(collection_command="drop", name="users", config_path=None, connection=None))

    assert capsys.readouterr().out == "7\n"
    collection_manager.delete_collection.assert_called_once_with("users")
