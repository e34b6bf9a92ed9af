##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Tests for the `database_manager.py` module.
"""

from typing import Callable
from unittest.mock import MagicMock

import pytest
from arango.exceptions import DatabaseCreateError
from pytest_mock import MockerFixture

from paradox.exceptions import DatabaseManagerError
from paradox.toolbox import Toolbox


@pytest.fixture
def system_db(toolbox_document: Toolbox, mocker: MockerFixture) -> MagicMock:
    """
    The `_system` database handle used by the document toolbox for administration.

    Args:
        toolbox_document: A document-mode toolbox.
        mocker: Used to pin the handle returned by `system_database`.

    Returns:
        The mocked `_system` database handle.
    """
    handle = MagicMock(name="db(_system)")
    mocker.patch.object(toolbox_document.get_connection(), "system_database", return_value=handle)
    return handle


class TestDatabaseManager:
    """Tests for the `DatabaseManager` class."""

    def test_create_database(self, toolbox_document: Toolbox, system_db: MagicMock):
        """
        Test that databases are created through `_system`.

        Args:
            toolbox_document: A document-mode toolbox.
            system_db: The mocked `_system` database handle.
        """
        assert toolbox_document.get_database_manager().create_database("reports") is True
        system_db.create_database.assert_called_once_with("reports")
        toolbox_document.get_connection().database.create_database.assert_not_called()

    def test_create_failure(self, toolbox_document: Toolbox, system_db: MagicMock, server_error: Callable):
        """
        Test that a rejected creation raises `DatabaseManagerError`.

        Args:
            toolbox_document: A document-mode toolbox.
            system_db: The mocked `_system` database handle.
            server_error: Builds python-arango server errors.
        """
        system_db.create_database.side_effect = server_error(DatabaseCreateError, "duplicate name", 1207, 409)
        with pytest.raises(DatabaseManagerError, match="duplicate name"):
            toolbox_document.get_database_manager().create_database("app2")

    def test_delete_database(self, toolbox_document: Toolbox, system_db: MagicMock):
        """
        Test dropping a database other than the current one.

        Args:
            toolbox_document: A document-mode toolbox.
            system_db: The mocked `_system` database handle.
        """
        system_db.delete_database.return_value = True
        assert toolbox_document.get_database_manager().delete_database("reports") is True
        system_db.delete_database.assert_called_once_with("reports")

    def test_delete_current_database(self, toolbox_document: Toolbox, system_db: MagicMock):
        """
        Test that the database in use cannot be dropped.

        Args:
            toolbox_document: A document-mode toolbox.
            system_db: The mocked `_system` database handle.
        """
        with pytest.raises(DatabaseManagerError, match="'app'"):
            toolbox_document.get_database_manager().delete_database("app")
        system_db.delete_database.assert_not_called()

    def test_list_and_has(self, toolbox_document: Toolbox, system_db: MagicMock):
        """
        Test listing databases and checking for one.

        Args:
            toolbox_document: A document-mode toolbox.
            system_db: The mocked `_system` database handle.
        """
        system_db.databases.return_value = ["_system", "app"]
        system_db.has_database.return_value = True
        manager = toolbox_document.get_database_manager()

        assert manager.list_databases() == ["_system", "app"]
        assert manager.has_database("app") is True
        system_db.has_database.assert_called_once_with("app")

    def test_use_database(self, toolbox_document: Toolbox):
        """
        Test that switching databases rebuilds the connection on next use.

        Args:
            toolbox_document: A document-mode toolbox.
        """
        manager = toolbox_document.get_database_manager()
        first = toolbox_document.get_connection()

        manager.use_database("reports")

        assert manager.get_current_database() == "reports"
        assert toolbox_document.get_database() == "reports"
        second = toolbox_document.get_connection()
        assert second is not first
        assert second.get_database_name() == "reports"
