##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Handler objects that perform operations against the server.

Every handler is bound to a `Connection` when it is created and works on the
database that connection was opened for. Handlers are cheap to build; the
toolbox hands out a fresh one on every request so that a database switch is
picked up immediately.

Failures are not caught here. python-arango raises subclasses of
`arango.exceptions.ArangoError` and callers are expected to pass them through
`Toolbox.normalise_driver_exceptions`.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from arango.collection import StandardCollection
from arango.database import StandardDatabase
from arango.graph import Graph

from paradox.driver.connection import Connection


LOG = logging.getLogger(__name__)

Document = Dict[str, Any]


class Handler:
    """
    Base class of all handlers.

    Attributes:
        connection (Connection): The connection the handler is bound to.
    """

    def __init__(self, connection: Connection):
        self.connection: Connection = connection

    def get_connection(self) -> Connection:
        """
        Get the connection this handler is bound to.

        Returns:
            The connection.
        """
        return self.connection

    @property
    def db(self) -> StandardDatabase:
        """The python-arango database handle of the bound connection."""
        return self.connection.database


class DocumentHandler(Handler):
    """
    Handler for documents stored in plain collections.
    """

    def _collection(self, collection: str) -> StandardCollection:
        return self.db.collection(collection)

    def get(self, collection: str, key: str) -> Optional[Document]:
        """
        Fetch a document.

        Args:
            collection: The collection name.
            key: The document key.

        Returns:
            The document, or None if it does not exist.
        """
        return self._collection(collection).get(key)

    def has(self, collection: str, key: str) -> bool:
        """Check whether a document exists."""
        return self._collection(collection).has(key)

    def save(self, collection: str, document: Document) -> Document:
        """
        Insert a new document.

        Returns:
            The document metadata (`_id`, `_key`, `_rev`).
        """
        return self._collection(collection).insert(document)

    def update(self, collection: str, document: Document) -> Document:
        """
        Partially update a document. `document` must carry `_key` or `_id`.

        Returns:
            The document metadata.
        """
        return self._collection(collection).update(document)

    def replace(self, collection: str, document: Document) -> Document:
        """
        Replace a document. `document` must carry `_key` or `_id`.

        Returns:
            The document metadata.
        """
        return self._collection(collection).replace(document)

    def remove(self, collection: str, document: Union[str, Document], ignore_missing: bool = False) -> bool:
        """
        Delete a document given its key or body.

        Returns:
            True if the document was deleted, False if it was missing and `ignore_missing` is set.
        """
        return bool(self._collection(collection).delete(document, ignore_missing=ignore_missing))

    def count(self, collection: str) -> int:
        """Count the documents in a collection."""
        return self._collection(collection).count()


class GraphHandler(Handler):
    """
    Handler for named graphs, their vertices and their edges.
    """

    def get_graph(self, name: str) -> Graph:
        """Get the python-arango graph object for a named graph."""
        return self.db.graph(name)

    def has_graph(self, name: str) -> bool:
        """Check whether a graph exists."""
        return self.db.has_graph(name)

    def create_graph(self, name: str, edge_definitions: List[Dict[str, Any]] = None) -> Graph:
        """
        Create a graph.

        Args:
            name: The graph name.
            edge_definitions: python-arango edge definitions, each with
                `edge_collection`, `from_vertex_collections` and `to_vertex_collections`.

        Returns:
            The python-arango graph object.
        """
        LOG.debug(f"Creating graph '{name}'.")
        return self.db.create_graph(name, edge_definitions=edge_definitions)

    def delete_graph(self, name: str, drop_collections: bool = False, ignore_missing: bool = False) -> bool:
        """Delete a graph, optionally dropping its collections."""
        LOG.debug(f"Deleting graph '{name}'.")
        return bool(self.db.delete_graph(name, ignore_missing=ignore_missing, drop_collections=drop_collections))

    def properties(self, name: str) -> Dict[str, Any]:
        """Get the properties of a graph."""
        return self.get_graph(name).properties()

    def get_vertex(self, graph: str, vertex_id: str) -> Optional[Document]:
        """
        Fetch a vertex by its id (`collection/key`).

        Returns:
            The vertex, or None if it does not exist.
        """
        return self.get_graph(graph).vertex(vertex_id)

    def save_vertex(self, graph: str, collection: str, vertex: Document) -> Document:
        """Insert a vertex into a vertex collection of a graph."""
        return self.get_graph(graph).insert_vertex(collection, vertex)

    def update_vertex(self, graph: str, vertex: Document) -> Document:
        """Partially update a vertex. `vertex` must carry `_id`."""
        return self.get_graph(graph).update_vertex(vertex)

    def replace_vertex(self, graph: str, vertex: Document) -> Document:
        """Replace a vertex. `vertex` must carry `_id`."""
        return self.get_graph(graph).replace_vertex(vertex)

    def remove_vertex(self, graph: str, vertex: Union[str, Document], ignore_missing: bool = False) -> bool:
        """Delete a vertex and the edges attached to it."""
        return bool(self.get_graph(graph).delete_vertex(vertex, ignore_missing=ignore_missing))

    def get_edge(self, graph: str, edge_id: str) -> Optional[Document]:
        """Fetch an edge by its id (`collection/key`)."""
        return self.get_graph(graph).edge(edge_id)

    def save_edge(self, graph: str, collection: str, edge: Document) -> Document:
        """Insert an edge. `edge` must carry `_from` and `_to`."""
        return self.get_graph(graph).insert_edge(collection, edge)

    def update_edge(self, graph: str, edge: Document) -> Document:
        """Partially update an edge. `edge` must carry `_id`."""
        return self.get_graph(graph).update_edge(edge)

    def replace_edge(self, graph: str, edge: Document) -> Document:
        """Replace an edge. `edge` must carry `_id`, `_from` and `_to`."""
        return self.get_graph(graph).replace_edge(edge)

    def remove_edge(self, graph: str, edge: Union[str, Document], ignore_missing: bool = False) -> bool:
        """Delete an edge."""
        return bool(self.get_graph(graph).delete_edge(edge, ignore_missing=ignore_missing))

    def link(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, graph: str, collection: str, from_vertex: str, to_vertex: str, data: Document = None
    ) -> Document:
        """Insert an edge between two vertices given their ids."""
        return self.get_graph(graph).link(collection, from_vertex, to_vertex, data=data)


class CollectionHandler(Handler):
    """
    Handler for collections.
    """

    def create(self, name: str, edge: bool = False, **options: Any) -> StandardCollection:
        """
        Create a collection.

        Args:
            name: The collection name.
            edge: Whether to create an edge collection.
            **options: Extra python-arango `create_collection` options.
        """
        LOG.debug(f"Creating {'edge ' if edge else ''}collection '{name}'.")
        return self.db.create_collection(name, edge=edge, **options)

    def drop(self, name: str, ignore_missing: bool = False) -> bool:
        """Delete a collection."""
        LOG.debug(f"Dropping collection '{name}'.")
        return bool(self.db.delete_collection(name, ignore_missing=ignore_missing))

    def has(self, name: str) -> bool:
        """Check whether a collection exists."""
        return self.db.has_collection(name)

    def truncate(self, name: str) -> bool:
        """Remove every document from a collection."""
        return bool(self.db.collection(name).truncate())

    def count(self, name: str) -> int:
        """Count the documents in a collection."""
        return self.db.collection(name).count()

    def properties(self, name: str) -> Dict[str, Any]:
        """Get the properties of a collection."""
        return self.db.collection(name).properties()

    def list(self, include_system: bool = False) -> List[str]:
        """
        List collection names.

        Args:
            include_system: Whether system collections (names starting with `_`) are included.
        """
        return [
            collection["name"]
            for collection in self.db.collections()
            if include_system or not collection.get("system", False)
        ]


class UserHandler(Handler):
    """
    Handler for user administration.
    """

    def add(self, username: str, password: str = None, active: bool = True, extra: Dict[str, Any] = None) -> Dict:
        """Create a user."""
        return self.db.create_user(username, password=password, active=active, extra=extra)

    def get(self, username: str) -> Dict[str, Any]:
        """Fetch a user."""
        return self.db.user(username)

    def has(self, username: str) -> bool:
        """Check whether a user exists."""
        return self.db.has_user(username)

    def list(self) -> List[Dict[str, Any]]:
        """List all users."""
        return self.db.users()

    def update(
        self, username: str, password: str = None, active: bool = None, extra: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Partially update a user."""
        return self.db.update_user(username, password=password, active=active, extra=extra)

    def replace(
        self, username: str, password: str, active: bool = None, extra: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Replace a user."""
        return self.db.replace_user(username, password, active=active, extra=extra)

    def remove(self, username: str, ignore_missing: bool = False) -> bool:
        """Delete a user."""
        return bool(self.db.delete_user(username, ignore_missing=ignore_missing))

    def grant(self, username: str, database: str, permission: str = "rw", collection: str = None) -> bool:
        """Grant a user access to a database (or one of its collections)."""
        return bool(self.db.update_permission(username, permission, database, collection=collection))

    def revoke(self, username: str, database: str, collection: str = None) -> bool:
        """Revoke a user's access to a database (or one of its collections)."""
        return bool(self.db.update_permission(username, "none", database, collection=collection))


class AdminHandler(Handler):
    """
    Handler for server administration and introspection.
    """

    def version(self, details: bool = False) -> Union[str, Dict[str, Any]]:
        """Get the server version."""
        return self.db.version(details=details)

    def details(self) -> Dict[str, Any]:
        """Get the server details."""
        return self.db.details()

    def statistics(self, description: bool = False) -> Dict[str, Any]:
        """Get the server statistics."""
        return self.db.statistics(description=description)

    def time(self):
        """Get the server system time."""
        return self.db.time()

    def engine(self) -> Dict[str, Any]:
        """Get the storage engine details."""
        return self.db.engine()

    def role(self) -> str:
        """Get the server role (SINGLE, COORDINATOR, ...)."""
        return self.db.role()

    def echo(self) -> Dict[str, Any]:
        """Have the server echo back details of the request."""
        return self.db.echo()


class Transaction(Handler):
    """
    A server-side transaction executed as a single request.

    Attributes:
        action (str): The JavaScript function run by the server.
        read_collections (List[str]): Collections the transaction reads.
        write_collections (List[str]): Collections the transaction writes.
        params (Dict[str, Any]): Parameters handed to the action.
        wait_for_sync (Optional[bool]): Whether to wait for the transaction to be synced to disk.
        lock_timeout (Optional[int]): Seconds to wait for collection locks.
    """

    def __init__(self, connection: Connection):
        super().__init__(connection)
        self.action: Optional[str] = None
        self.read_collections: List[str] = []
        self.write_collections: List[str] = []
        self.params: Dict[str, Any] = {}
        self.wait_for_sync: Optional[bool] = None
        self.lock_timeout: Optional[int] = None

    def set_action(self, action: str) -> "Transaction":
        """Set the JavaScript action."""
        self.action = action
        return self

    def set_read_collections(self, collections: Iterable[str]) -> "Transaction":
        """Set the collections read by the transaction."""
        self.read_collections = list(collections)
        return self

    def set_write_collections(self, collections: Iterable[str]) -> "Transaction":
        """Set the collections written by the transaction."""
        self.write_collections = list(collections)
        return self

    def set_params(self, params: Dict[str, Any]) -> "Transaction":
        """Set the parameters handed to the action."""
        self.params = dict(params)
        return self

    def execute(self) -> Any:
        """
        Run the transaction on the server.

        Returns:
            Whatever the action returns.

        Raises:
            ValueError: If no action was set.
        """
        if not self.action:
            raise ValueError("A transaction needs an action before it can be executed.")
        return self.db.execute_transaction(
            self.action,
            params=self.params or None,
            read=self.read_collections or None,
            write=self.write_collections or None,
            sync=self.wait_for_sync,
            timeout=self.lock_timeout,
        )
