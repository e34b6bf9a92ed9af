##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Paradox CLI commands.

Modules:
    command_entry_point: The `CommandEntryPoint` base class.
    collection: The `collection` command for listing, creating and dropping collections.
    config: The `config` command for showing the configuration.
    database: The `database` command for listing, creating and dropping databases.
    info: The `info` command for showing details of the server behind a connection.
"""

from paradox.cli.commands.collection import CollectionCommand
from paradox.cli.commands.config import ConfigCommand
from paradox.cli.commands.database import DatabaseCommand
from paradox.cli.commands.info import InfoCommand


ALL_COMMANDS = [
    ConfigCommand(),
    InfoCommand(),
    DatabaseCommand(),
    CollectionCommand(),
]
