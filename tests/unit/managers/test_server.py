##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Tests for the `server.py` module.
"""

from typing import Callable

import pytest
from arango.exceptions import ServerVersionError, UserCreateError

from paradox.exceptions import ServerError
from paradox.toolbox import Toolbox


class TestServerInformation:
    """Tests for the read-only methods of the `Server` class."""

    def test_information(self, toolbox_document: Toolbox):
        """
        Test reading the server version, details, statistics and time.

        Args:
            toolbox_document: A document-mode toolbox.
        """
        db = toolbox_document.get_connection().database
        db.version.return_value = "3.11.4"
        db.details.return_value = {"mode": "server"}
        db.statistics.return_value = {"time": 1.0}
        db.time.return_value = "2024-01-01T00:00:00"
        server = toolbox_document.get_server()

        assert server.get_version() == "3.11.4"
        assert server.get_server_info() == {"mode": "server"}
        assert server.get_statistics() == {"time": 1.0}
        assert server.get_time() == "2024-01-01T00:00:00"

    def test_unreachable_server(self, toolbox_document: Toolbox, server_error: Callable):
        """
        Test that a failing request raises `ServerError`.

        Args:
            toolbox_document: A document-mode toolbox.
            server_error: Builds python-arango server errors.
        """
        toolbox_document.get_connection().database.version.side_effect = server_error(
            ServerVersionError, "not authorized to execute this request", 11, 401
        )
        with pytest.raises(ServerError) as excinfo:
            toolbox_document.get_server().get_version()
        assert excinfo.value.code == 11


class TestUserAdministration:
    """Tests for the user methods of the `Server` class."""

    def test_create_user(self, toolbox_document: Toolbox):
        """
        Test creating a user.

        Args:
            toolbox_document: A document-mode toolbox.
        """
        db = toolbox_document.get_connection().database
        assert toolbox_document.get_server().create_user("alice", "pw", data={"team": "a"}) is True
        db.create_user.assert_called_once_with("alice", password="pw", active=True, extra={"team": "a"})

    def test_create_duplicate_user(self, toolbox_document: Toolbox, server_error: Callable):
        """
        Test that a duplicate user raises `ServerError`.

        Args:
            toolbox_document: A document-mode toolbox.
            server_error: Builds python-arango server errors.
        """
        toolbox_document.get_connection().database.create_user.side_effect = server_error(
            UserCreateError, "duplicate user", 1702, 409
        )
        with pytest.raises(ServerError, match=r"\[1702\] duplicate user"):
            toolbox_document.get_server().create_user("alice", "pw")

    def test_user_lifecycle(self, toolbox_document: Toolbox):
        """
        Test reading, listing, updating and deleting users.

        Args:
            toolbox_document: A document-mode toolbox.
        """
        db = toolbox_document.get_connection().database
        db.user.return_value = {"username": "alice", "active": True}
        db.users.return_value = [{"username": "root"}, {"username": "alice"}]
        db.delete_user.return_value = True
        server = toolbox_document.get_server()

        assert server.get_user_info("alice") == {"username": "alice", "active": True}
        assert server.list_users() == [{"username": "root"}, {"username": "alice"}]
        assert server.change_password("alice", "new") is True
        assert server.update_user_data("alice", {"team": "b"}) is True
        assert server.delete_user("alice") is True

        assert db.update_user.call_args_list[0].kwargs == {"password": "new", "active": None, "extra": None}
        assert db.update_user.call_args_list[1].kwargs == {"password": None, "active": None, "extra": {"team": "b"}}
        db.delete_user.assert_called_once_with("alice", ignore_missing=False)

    def test_permissions(self, toolbox_document: Toolbox):
        """
        Test that permissions default to the toolbox's database.

        Args:
            toolbox_document: A document-mode toolbox.
        """
        db = toolbox_document.get_connection().database
        server = toolbox_document.get_server()

        server.grant_permissions("alice")
        server.grant_permissions("alice", "reports", permission="ro")
        server.revoke_permissions("alice")

        assert [call.args for call in db.update_permission.call_args_list] == [
            ("alice", "rw", "app"),
            ("alice", "ro", "reports"),
            ("alice", "none", "app"),
        ]
