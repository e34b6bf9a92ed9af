##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
`DatabaseManager` module for creating, dropping and switching databases.

Database administration always goes through the `_system` database.
"""

import logging
from typing import List

from paradox.exceptions import DatabaseManagerError
from paradox.managers.component import ToolboxComponent


LOG = logging.getLogger(__name__)


class DatabaseManager(ToolboxComponent):
    """
    Manager class for databases.

    Methods:
        create_database: Create a database.
        delete_database: Drop a database.
        list_databases: List database names.
        has_database: Check whether a database exists.
        get_current_database: The database the toolbox works on.
        use_database: Switch the toolbox to another database.
    """

    error_class = DatabaseManagerError

    def create_database(self, name: str) -> bool:
        """
        Create a database.

        Raises:
            DatabaseManagerError: If the server rejects the request.
        """
        with self.driver_errors(f"create database '{name}'"):
            self.toolbox.get_connection().system_database().create_database(name)
        LOG.info(f"Created database '{name}'.")
        return True

    def delete_database(self, name: str) -> bool:
        """
        Drop a database.

        Raises:
            DatabaseManagerError: If the database is the one in use, or the server rejects the request.
        """
        if name == self.toolbox.get_database():
            raise DatabaseManagerError(f"Cannot delete '{name}' while the toolbox is using it.")
        with self.driver_errors(f"delete database '{name}'"):
            deleted = self.toolbox.get_connection().system_database().delete_database(name)
        LOG.info(f"Deleted database '{name}'.")
        return deleted

    def list_databases(self) -> List[str]:
        """List database names."""
        with self.driver_errors("list databases"):
            return self.toolbox.get_connection().system_database().databases()

    def has_database(self, name: str) -> bool:
        """Check whether a database exists."""
        with self.driver_errors(f"look up database '{name}'"):
            return self.toolbox.get_connection().system_database().has_database(name)

    def get_current_database(self) -> str:
        """Get the name of the database the toolbox works on."""
        return self.toolbox.get_database()

    def use_database(self, name: str):
        """
        Switch the toolbox to another database.

        Args:
            name: The database name.
        """
        LOG.debug(f"Switching from database '{self.toolbox.get_database()}' to '{name}'.")
        self.toolbox.set_database(name)
