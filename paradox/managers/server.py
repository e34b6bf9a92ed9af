##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
`Server` module for server information and user administration.
"""

from typing import Any, Dict, List

from paradox.exceptions import ServerError
from paradox.managers.component import ToolboxComponent


class Server(ToolboxComponent):
    """
    Server information and user administration.

    Methods:
        get_version: The server version.
        get_server_info: The server details.
        get_statistics: The server statistics.
        get_time: The server system time.
        create_user: Create a user.
        delete_user: Delete a user.
        get_user_info: Get a user.
        list_users: List users.
        change_password: Change a user's password.
        update_user_data: Replace the extra data stored with a user.
        grant_permissions: Grant a user access to a database.
        revoke_permissions: Revoke a user's access to a database.
    """

    error_class = ServerError

    def get_version(self) -> str:
        """Get the server version."""
        with self.driver_errors("read the server version"):
            return self.toolbox.get_admin_handler().version()

    def get_server_info(self) -> Dict[str, Any]:
        """Get the server details."""
        with self.driver_errors("read the server details"):
            return self.toolbox.get_admin_handler().details()

    def get_statistics(self) -> Dict[str, Any]:
        """Get the server statistics."""
        with self.driver_errors("read the server statistics"):
            return self.toolbox.get_admin_handler().statistics()

    def get_time(self):
        """Get the server system time."""
        with self.driver_errors("read the server time"):
            return self.toolbox.get_admin_handler().time()

    def create_user(self, username: str, password: str = None, active: bool = True, data: Dict = None) -> bool:
        """
        Create a user.

        Args:
            username: The username.
            password: The password.
            active: Whether the user can log in.
            data: Extra data stored with the user.
        """
        with self.driver_errors(f"create user '{username}'"):
            self.toolbox.get_user_handler().add(username, password=password, active=active, extra=data)
        return True

    def delete_user(self, username: str) -> bool:
        """Delete a user."""
        with self.driver_errors(f"delete user '{username}'"):
            return self.toolbox.get_user_handler().remove(username)

    def get_user_info(self, username: str) -> Dict[str, Any]:
        """Get a user."""
        with self.driver_errors(f"read user '{username}'"):
            return self.toolbox.get_user_handler().get(username)

    def list_users(self) -> List[Dict[str, Any]]:
        """List users."""
        with self.driver_errors("list users"):
            return self.toolbox.get_user_handler().list()

    def change_password(self, username: str, password: str) -> bool:
        """Change a user's password."""
        with self.driver_errors(f"change the password of user '{username}'"):
            self.toolbox.get_user_handler().update(username, password=password)
        return True

    def update_user_data(self, username: str, data: Dict[str, Any]) -> bool:
        """Replace the extra data stored with a user."""
        with self.driver_errors(f"update user '{username}'"):
            self.toolbox.get_user_handler().update(username, extra=data)
        return True

    def grant_permissions(self, username: str, database: str = None, permission: str = "rw") -> bool:
        """
        Grant a user access to a database.

        Args:
            username: The username.
            database: The database. Defaults to the toolbox's database.
            permission: `rw` or `ro`.
        """
        database = database or self.toolbox.get_database()
        with self.driver_errors(f"grant '{username}' access to '{database}'"):
            return self.toolbox.get_user_handler().grant(username, database, permission=permission)

    def revoke_permissions(self, username: str, database: str = None) -> bool:
        """Revoke a user's access to a database (the toolbox's database by default)."""
        database = database or self.toolbox.get_database()
        with self.driver_errors(f"revoke the access of '{username}' to '{database}'"):
            return self.toolbox.get_user_handler().revoke(username, database)
