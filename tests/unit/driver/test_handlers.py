##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Tests for the `handlers.py` module.
"""

from unittest.mock import MagicMock

import pytest

from paradox.driver.handlers import (
    AdminHandler,
    CollectionHandler,
    DocumentHandler,
    GraphHandler,
    Transaction,
    UserHandler,
)


@pytest.fixture
def handlers_connection() -> MagicMock:
    """
    A mocked connection whose `database` is a mocked python-arango database.

    Returns:
        The mocked connection.
    """
    return MagicMock(name="Connection")


class TestDocumentHandler:
    """Tests for the `DocumentHandler` class."""

    def test_bound_to_connection(self, handlers_connection: MagicMock):
        """
        Test that the handler works on its connection's database.

        Args:
            handlers_connection: A mocked connection.
        """
        handler = DocumentHandler(handlers_connection)
        assert handler.get_connection() is handlers_connection
        assert handler.db is handlers_connection.database

    def test_crud(self, handlers_connection: MagicMock):
        """
        Test that document operations go to the named collection.

        Args:
            handlers_connection: A mocked connection.
        """
        db = handlers_connection.database
        collection = db.collection.return_value
        collection.insert.return_value = {"_id": "users/1", "_key": "1", "_rev": "a"}
        collection.get.return_value = {"_key": "1", "name": "alice"}
        collection.delete.return_value = True
        handler = DocumentHandler(handlers_connection)

        assert handler.save("users", {"name": "alice"}) == {"_id": "users/1", "_key": "1", "_rev": "a"}
        assert handler.get("users", "1") == {"_key": "1", "name": "alice"}
        handler.update("users", {"_key": "1", "age": 3})
        handler.replace("users", {"_key": "1", "name": "bob"})
        assert handler.remove("users", "1") is True

        db.collection.assert_called_with("users")
        collection.insert.assert_called_once_with({"name": "alice"})
        collection.get.assert_called_once_with("1")
        collection.update.assert_called_once_with({"_key": "1", "age": 3})
        collection.replace.assert_called_once_with({"_key": "1", "name": "bob"})
        collection.delete.assert_called_once_with("1", ignore_missing=False)

    def test_count_and_has(self, handlers_connection: MagicMock):
        """
        Test counting and existence checks.

        Args:
            handlers_connection: A mocked connection.
        """
        collection = handlers_connection.database.collection.return_value
        collection.count.return_value = 5
        collection.has.return_value = False
        handler = DocumentHandler(handlers_connection)

        assert handler.count("users") == 5
        assert handler.has("users", "9") is False


class TestGraphHandler:
    """Tests for the `GraphHandler` class."""

    def test_graph_lifecycle(self, handlers_connection: MagicMock):
        """
        Test creating, checking and deleting graphs.

        Args:
            handlers_connection: A mocked connection.
        """
        db = handlers_connection.database
        db.delete_graph.return_value = True
        handler = GraphHandler(handlers_connection)
        definitions = [{"edge_collection": "e", "from_vertex_collections": ["v"], "to_vertex_collections": ["v"]}]

        handler.create_graph("social", edge_definitions=definitions)
        handler.has_graph("social")
        assert handler.delete_graph("social", drop_collections=True) is True

        db.create_graph.assert_called_once_with("social", edge_definitions=definitions)
        db.has_graph.assert_called_once_with("social")
        db.delete_graph.assert_called_once_with("social", ignore_missing=False, drop_collections=True)

    def test_vertices_and_edges(self, handlers_connection: MagicMock):
        """
        Test that vertex and edge operations go through the named graph.

        Args:
            handlers_connection: A mocked connection.
        """
        graph = handlers_connection.database.graph.return_value
        handler = GraphHandler(handlers_connection)

        handler.save_vertex("social", "v", {"name": "alice"})
        handler.get_vertex("social", "v/1")
        handler.update_vertex("social", {"_id": "v/1", "age": 3})
        handler.remove_vertex("social", "v/1")
        handler.save_edge("social", "e", {"_from": "v/1", "_to": "v/2"})
        handler.get_edge("social", "e/1")
        handler.remove_edge("social", "e/1", ignore_missing=True)
        handler.link("social", "e", "v/1", "v/2", data={"since": 2020})

        handlers_connection.database.graph.assert_called_with("social")
        graph.insert_vertex.assert_called_once_with("v", {"name": "alice"})
        graph.vertex.assert_called_once_with("v/1")
        graph.update_vertex.assert_called_once_with({"_id": "v/1", "age": 3})
        graph.delete_vertex.assert_called_once_with("v/1", ignore_missing=False)
        graph.insert_edge.assert_called_once_with("e", {"_from": "v/1", "_to": "v/2"})
        graph.edge.assert_called_once_with("e/1")
        graph.delete_edge.assert_called_once_with("e/1", ignore_missing=True)
        graph.link.assert_called_once_with("e", "v/1", "v/2", data={"since": 2020})


class TestCollectionHandler:
    """Tests for the `CollectionHandler` class."""

    def test_operations(self, handlers_connection: MagicMock):
        """
        Test collection operations.

        Args:
            handlers_connection: A mocked connection.
        """
        db = handlers_connection.database
        handler = CollectionHandler(handlers_connection)

        handler.create("knows", edge=True)
        handler.drop("knows")
        handler.has("users")
        handler.truncate("users")
        handler.count("users")

        db.create_collection.assert_called_once_with("knows", edge=True)
        db.delete_collection.assert_called_once_with("knows", ignore_missing=False)
        db.has_collection.assert_called_once_with("users")
        db.collection.return_value.truncate.assert_called_once()
        db.collection.return_value.count.assert_called_once()

    def test_list_skips_system_collections(self, handlers_connection: MagicMock):
        """
        Test that system collections are only listed on request.

        Args:
            handlers_connection: A mocked connection.
        """
        handlers_connection.database.collections.return_value = [
            {"name": "_graphs", "system": True},
            {"name": "users", "system": False},
        ]
        handler = CollectionHandler(handlers_connection)

        assert handler.list() == ["users"]
        assert handler.list(include_system=True) == ["_graphs", "users"]


class TestUserAndAdminHandlers:
    """Tests for the `UserHandler` and `AdminHandler` classes."""

    def test_user_operations(self, handlers_connection: MagicMock):
        """
        Test user administration.

        Args:
            handlers_connection: A mocked connection.
        """
        db = handlers_connection.database
        handler = UserHandler(handlers_connection)

        handler.add("alice", password="pw")
        handler.update("alice", password="new")
        handler.grant("alice", "app")
        handler.revoke("alice", "app")
        handler.remove("alice")

        db.create_user.assert_called_once_with("alice", password="pw", active=True, extra=None)
        db.update_user.assert_called_once_with("alice", password="new", active=None, extra=None)
        assert db.update_permission.call_args_list[0].args == ("alice", "rw", "app")
        assert db.update_permission.call_args_list[1].args == ("alice", "none", "app")
        db.delete_user.assert_called_once_with("alice", ignore_missing=False)

    def test_admin_operations(self, handlers_connection: MagicMock):
        """
        Test server introspection.

        Args:
            handlers_connection: A mocked connection.
        """
        db = handlers_connection.database
        db.version.return_value = "3.11.0"
        handler = AdminHandler(handlers_connection)

        assert handler.version() == "3.11.0"
        handler.statistics()
        handler.details()

        db.version.assert_called_once_with(details=False)
        db.statistics.assert_called_once_with(description=False)
        db.details.assert_called_once()


class TestTransaction:
    """Tests for the `Transaction` class."""

    def test_execute(self, handlers_connection: MagicMock):
        """
        Test that a configured transaction is sent to the server.

        Args:
            handlers_connection: A mocked connection.
        """
        db = handlers_connection.database
        db.execute_transaction.return_value = 42
        transaction = (
            Transaction(handlers_connection)
            .set_action("function (p) { return p.x; }")
            .set_read_collections(["users"])
            .set_write_collections(("logs",))
            .set_params({"x": 42})
        )

        assert transaction.execute() == 42
        db.execute_transaction.assert_called_once_with(
            "function (p) { return p.x; }",
            params={"x": 42},
            read=["users"],
            write=["logs"],
            sync=None,
            timeout=None,
        )

    def test_execute_without_action(self, handlers_connection: MagicMock):
        """
        Test that a transaction without an action is refused.

        Args:
            handlers_connection: A mocked connection.
        """
        with pytest.raises(ValueError, match="action"):
            Transaction(handlers_connection).execute()
        handlers_connection.database.execute_transaction.assert_not_called()
