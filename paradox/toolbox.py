##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
The toolbox is the session object of Paradox.

Each toolbox represents one logical connection to an ArangoDB server. It keeps
the connection settings, builds the python-arango connection on first use,
hands out handler objects bound to that connection, and owns the components
(pod manager, finder, query helper, ...) that the rest of Paradox works with.
Those components only hold weak references back to the toolbox.

A toolbox works either on plain documents or on a single named graph. The mode
is decided by the `graph` option at construction and never changes.
"""

import logging
import random
import threading
from typing import Any, Dict, Optional, Union

from arango.exceptions import ArangoError, ArangoServerError

from paradox import DEFAULT_DATABASE
from paradox.debug import Debug
from paradox.driver.connection import AUTH_TYPE_BASIC, Connection, ConnectionOptions
from paradox.driver.handlers import (
    AdminHandler,
    CollectionHandler,
    DocumentHandler,
    GraphHandler,
    Transaction,
    UserHandler,
)
from paradox.exceptions import ModeError, OwnershipError, ToolboxConnectionError
from paradox.formatter import DefaultModelFormatter, ModelFormatter
from paradox.managers.collection_manager import CollectionManager
from paradox.managers.database_manager import DatabaseManager
from paradox.managers.finder import Finder
from paradox.managers.graph_manager import GraphManager
from paradox.managers.pod_manager import PodManager
from paradox.managers.query import Query
from paradox.managers.server import Server
from paradox.managers.transaction_manager import TransactionManager


LOG = logging.getLogger(__name__)

RECOGNIZED_OPTIONS = ("username", "password", "graph", "database")
BINDING_PARAMETER_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BINDING_PARAMETER_SUFFIX_LENGTH = 7


class Toolbox:  # pylint: disable=too-many-instance-attributes,too-many-public-methods
    """
    Session object holding the configuration and tools of one connection.

    Attributes:
        debug (Any): The tracing collaborator forwarded into connection construction.

    Methods:
        get_endpoint: Get the server address.
        get_username: Get the username.
        get_password: Get the password.
        get_graph: Get the name of the graph, if this toolbox manages one.
        is_graph: Whether this toolbox manages a graph.
        get_database: Get the name of the database.
        set_database: Switch to another database.
        get_vertex_collection_name: Name of the vertex collection of the graph.
        get_edge_collection_name: Name of the edge collection of the graph.
        get_connection: Get (and build on first use) the connection.
        get_document_handler: A new document handler.
        get_graph_handler: A new graph handler.
        get_collection_handler: A new collection handler.
        get_user_handler: A new user handler.
        get_admin_handler: A new admin handler.
        get_transaction_object: A new transaction object.
        get_driver: The cached graph or document handler, depending on the mode.
        generate_binding_parameter: A bind parameter name that clashes with no user parameter.
        parse_id_for_key: Extract the key from a `collection/key` id.
        parse_id: Split a `collection/key` id.
        format_model: Ask the formatter which model wraps a pod.
        set_model_formatter: Replace the formatter.
        validate_pod: Check that a pod or model belongs to this toolbox.
        normalise_driver_exceptions: Turn a driver failure into a message and a code.
    """

    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        endpoint: str,
        options: Dict[str, Any] = None,
        debug: Any = False,
        formatter: ModelFormatter = None,
        rng: random.Random = None,
    ):
        """
        Set up the toolbox and create its components.

        Args:
            endpoint: The server address, for example `tcp://localhost:8529`.
            options: Optional settings:
                - `username`: The username to connect with.
                - `password`: The password to connect with.
                - `graph`: The name of the graph to work on. Leave it out to
                  work on plain collections and documents.
                - `database`: The name of the database. Defaults to `_system`.
            debug: A tracer (any object with a `trace(direction, data)` method),
                or a flag that enables or disables a default `Debug` tracer.
            formatter: The model formatter. Defaults to `DefaultModelFormatter`.
            rng: Source of randomness for `generate_binding_parameter`.
        """
        options = options or {}
        for key in options:
            if key not in RECOGNIZED_OPTIONS:
                LOG.debug(f"Ignoring unrecognized toolbox option '{key}'.")

        self._endpoint: str = endpoint
        self._username: Optional[str] = options.get("username")
        self._password: Optional[str] = options.get("password")
        self._graph: Optional[str] = options.get("graph")
        self._database: str = options.get("database") or DEFAULT_DATABASE

        # Tracer objects are kept as given; plain flags get a default tracer
        self.debug: Any = debug if callable(getattr(debug, "trace", None)) else Debug(enabled=bool(debug))
        self._formatter: ModelFormatter = formatter or DefaultModelFormatter()
        self._rng: random.Random = rng or random.Random()

        # Lazily built; see get_connection and get_driver
        self._connection: Optional[Connection] = None
        self._driver: Optional[Union[DocumentHandler, GraphHandler]] = None
        self._lock = threading.RLock()

        self._finder = Finder(self)
        self._pod_manager = PodManager(self)
        self._collection_manager = CollectionManager(self)
        self._query = Query(self)
        self._server = Server(self)
        self._graph_manager = GraphManager(self)
        self._transaction_manager = TransactionManager(self)
        self._database_manager = DatabaseManager(self)

    def __repr__(self) -> str:
        mode = f"graph={self._graph!r}" if self.is_graph() else "documents"
        return f"Toolbox(endpoint={self._endpoint!r}, database={self._database!r}, {mode})"

    ##############################
    # Connection & configuration #
    ##############################

    def get_endpoint(self) -> str:
        """
        Get the endpoint.

        Returns:
            The server address.
        """
        return self._endpoint

    def get_username(self) -> Optional[str]:
        """
        Get the username.

        Returns:
            The username, or None if none was configured.
        """
        return self._username

    def get_password(self) -> Optional[str]:
        """
        Get the password.

        Returns:
            The password, or None if none was configured.
        """
        return self._password

    def get_graph(self) -> Optional[str]:
        """
        Get the name of the graph if this toolbox manages a graph.

        Returns:
            The graph name, or None in document mode.
        """
        return self._graph

    def is_graph(self) -> bool:
        """
        Whether this toolbox manages a graph.

        Returns:
            True if the toolbox was built with a non-empty graph name.
        """
        return bool(self._graph)

    def get_database(self) -> str:
        """
        Get the name of the database.

        Returns:
            The database name.
        """
        return self._database

    def set_database(self, name: str):
        """
        Switch to another database.

        The cached connection is dropped and rebuilt against `name` the next
        time it is needed. The cached driver from `get_driver` is kept.

        Args:
            name: The database name.
        """
        with self._lock:
            self._database = name
            self._invalidate_connection()

    def _invalidate_connection(self):
        """Drop the cached connection. Only called when the database changes."""
        if self._connection is not None:
            LOG.debug(f"Dropping connection to database '{self._connection.get_database_name()}'.")
        self._connection = None

    def get_connection(self) -> Connection:
        """
        Get the connection, building it on first use.

        Returns:
            The connection for the current endpoint, credentials and database.

        Raises:
            ToolboxConnectionError: If the driver rejects the connection options.
        """
        with self._lock:
            if self._connection is None:
                options = ConnectionOptions(
                    endpoint=self._endpoint,
                    auth_type=AUTH_TYPE_BASIC,
                    auth_user=self._username,
                    auth_passwd=self._password,
                    trace=self.debug,
                    enhanced_trace=True,
                    database=self._database,
                )
                try:
                    self._connection = Connection(options)
                except (ValueError, TypeError, ArangoError) as exc:
                    raise ToolboxConnectionError(f"Could not connect to {self._endpoint}: {exc}") from exc
            return self._connection

    ##########################
    # Graph-mode collections #
    ##########################

    def get_vertex_collection_name(self) -> str:
        """
        Generate the name of the vertex collection of the graph.

        Returns:
            `<graph>VertexCollection`.

        Raises:
            ModeError: If this toolbox does not manage a graph.
        """
        if not self.is_graph():
            raise ModeError("get_vertex_collection_name() can only be used for connections that manage graphs.")
        return f"{self._graph}VertexCollection"

    def get_edge_collection_name(self) -> str:
        """
        Generate the name of the edge collection of the graph.

        Returns:
            `<graph>EdgeCollection`.

        Raises:
            ModeError: If this toolbox does not manage a graph.
        """
        if not self.is_graph():
            raise ModeError("get_edge_collection_name() can only be used for connections that manage graphs.")
        return f"{self._graph}EdgeCollection"

    ##############
    # Components #
    ##############

    def get_pod_manager(self) -> PodManager:
        """Get the pod manager."""
        return self._pod_manager

    def get_collection_manager(self) -> CollectionManager:
        """Get the collection manager."""
        return self._collection_manager

    def get_graph_manager(self) -> GraphManager:
        """Get the graph manager."""
        return self._graph_manager

    def get_database_manager(self) -> DatabaseManager:
        """Get the database manager."""
        return self._database_manager

    def get_finder(self) -> Finder:
        """Get the finder."""
        return self._finder

    def get_query(self) -> Query:
        """Get the query helper."""
        return self._query

    def get_server(self) -> Server:
        """Get the server manager."""
        return self._server

    def get_transaction_manager(self) -> TransactionManager:
        """Get the transaction manager."""
        return self._transaction_manager

    ############
    # Handlers #
    ############

    def get_document_handler(self) -> DocumentHandler:
        """Get a document handler bound to the current connection."""
        return DocumentHandler(self.get_connection())

    def get_graph_handler(self) -> GraphHandler:
        """Get a graph handler bound to the current connection."""
        return GraphHandler(self.get_connection())

    def get_collection_handler(self) -> CollectionHandler:
        """Get a collection handler bound to the current connection."""
        return CollectionHandler(self.get_connection())

    def get_user_handler(self) -> UserHandler:
        """Get a user handler bound to the current connection."""
        return UserHandler(self.get_connection())

    def get_admin_handler(self) -> AdminHandler:
        """Get an admin handler bound to the current connection."""
        return AdminHandler(self.get_connection())

    def get_transaction_object(self) -> Transaction:
        """Get a transaction object bound to the current connection."""
        return Transaction(self.get_connection())

    def get_driver(self) -> Union[DocumentHandler, GraphHandler]:
        """
        Get the handler matching the mode of this toolbox.

        The handler is built once and cached for the lifetime of the toolbox.
        It is not rebuilt when the database changes.

        Returns:
            A `GraphHandler` in graph mode, a `DocumentHandler` otherwise.
        """
        with self._lock:
            if self._driver is None:
                if self.is_graph():
                    self._driver = self.get_graph_handler()
                else:
                    self._driver = self.get_document_handler()
            return self._driver

    #############
    # Utilities #
    #############

    def generate_binding_parameter(self, parameter: str, user_parameters: Dict[str, Any]) -> str:
        """
        Generate a bind parameter name that does not clash with any user defined parameter.

        While the name is taken, 7 random characters from `0-9a-z` are appended to it.

        Args:
            parameter: The preferred name.
            user_parameters: The bind parameters supplied by the user.

        Returns:
            `parameter` itself if it is free, otherwise `parameter` with random suffixes.
        """
        while parameter in user_parameters:
            parameter += "".join(
                self._rng.choice(BINDING_PARAMETER_ALPHABET) for _ in range(BINDING_PARAMETER_SUFFIX_LENGTH)
            )
        return parameter

    def parse_id_for_key(self, id: str) -> Optional[str]:  # pylint: disable=redefined-builtin
        """
        Given an id in ArangoDB format (`mycollection/123456`), return the key (`123456`).

        Args:
            id: The document id.

        Returns:
            The key, or None if the id has no `/`.
        """
        return self.parse_id(id)["key"]

    def parse_id(self, id: str) -> Dict[str, Optional[str]]:  # pylint: disable=redefined-builtin
        """
        Given an id in ArangoDB format (`mycollection/123456`), split it into collection and key.

        Args:
            id: The document id.

        Returns:
            A dict with `collection` and `key`. If the id has no `/`, the whole
            id is the collection and the key is None.
        """
        collection, separator, key = id.partition("/")
        return {"collection": collection, "key": key if separator else None}

    def format_model(self, pod) -> str:
        """
        Get the model class the formatter selects for a pod.

        Args:
            pod: The pod.

        Returns:
            The dotted path of the model class.
        """
        return self._formatter.format_model(pod, self._graph)

    def set_model_formatter(self, formatter: ModelFormatter):
        """
        Replace the model formatter.

        Args:
            formatter: The new formatter.
        """
        self._formatter = formatter

    def validate_pod(self, pod) -> bool:
        """
        Check that a pod or model belongs to this toolbox.

        Args:
            pod: A pod, or a model wrapping one.

        Returns:
            True if the pod belongs to this toolbox.

        Raises:
            OwnershipError: If it belongs to another toolbox, or is neither a pod
                nor a model.
        """
        get_pod = getattr(pod, "get_pod", None)
        target = get_pod() if callable(get_pod) else None
        if not callable(getattr(target, "compare_toolbox", None)):
            raise OwnershipError(f"Expected a pod or a model, got {type(pod).__name__}.")
        if target.compare_toolbox(self):
            return True
        raise OwnershipError("The pod/model does not belong to this toolbox.")

    def normalise_driver_exceptions(self, exception: Exception) -> Dict[str, Any]:
        """
        Turn an exception raised by the driver into a message and a code.

        Args:
            exception: The exception.

        Returns:
            A dict with `message` and `code`. Server errors report the server's
            error message and error number; anything else reports its own
            message and `code` attribute (None when it has none).
        """
        if isinstance(exception, ArangoServerError):
            return {"message": exception.error_message or str(exception), "code": exception.error_code}
        return {
            "message": getattr(exception, "message", None) or str(exception),
            "code": getattr(exception, "code", None),
        }
