##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
The `Paradox` registry of named connections.

Applications usually talk to one or a few ArangoDB databases. `Paradox` keeps
their settings under names, builds one `Toolbox` per name on first use, and
shares a single tracer and model formatter between all of them.

    paradox = Paradox()
    paradox.add_connection("main", "tcp://localhost:8529", {"username": "root", "password": ""})
    users = paradox.get_toolbox().get_finder().find_all("users")
"""

import logging
from typing import Any, Dict, List, Optional

from paradox.config.configfile import load_config
from paradox.debug import Debug
from paradox.exceptions import ConnectionNotFoundError
from paradox.formatter import DefaultModelFormatter, ModelFormatter
from paradox.toolbox import Toolbox


LOG = logging.getLogger(__name__)


class Paradox:
    """
    Registry of named connections and their toolboxes.

    Attributes:
        debug (Debug): The tracer shared by every toolbox.

    Methods:
        add_connection: Register a connection.
        remove_connection: Forget a connection and its toolbox.
        use_connection: Select the connection used when none is named.
        get_current_connection: The name of the selected connection.
        list_connections: The names of every registered connection.
        get_toolbox: The toolbox of a connection, built on first use.
        set_debug: Turn tracing on or off for every toolbox.
        set_model_formatter: Replace the formatter of every toolbox.
        load_config: Register the connections of a configuration file.
    """

    def __init__(self, debug: bool = False, formatter: ModelFormatter = None):
        """
        Initialize an empty registry.

        Args:
            debug: Whether server traffic is traced.
            formatter: The model formatter shared by every toolbox.
        """
        self.debug: Debug = Debug(enabled=debug)
        self._formatter: ModelFormatter = formatter or DefaultModelFormatter()
        self._connections: Dict[str, Dict[str, Any]] = {}
        self._toolboxes: Dict[str, Toolbox] = {}
        self._current: Optional[str] = None

    def add_connection(self, name: str, endpoint: str, options: Dict[str, Any] = None):
        """
        Register a connection. The first connection registered becomes the current one.

        Args:
            name: The connection name.
            endpoint: The server address, for example `tcp://localhost:8529`.
            options: The toolbox options (`username`, `password`, `database`, `graph`).

        Raises:
            ValueError: If a connection with that name already exists.
        """
        if name in self._connections:
            raise ValueError(f"A connection named '{name}' already exists.")
        self._connections[name] = {"endpoint": endpoint, "options": dict(options or {})}
        if self._current is None:
            self._current = name
        LOG.debug(f"Registered connection '{name}' to {endpoint}.")

    def remove_connection(self, name: str):
        """
        Forget a connection and the toolbox built for it.

        Raises:
            ConnectionNotFoundError: If no connection has that name.
        """
        self._require(name)
        del self._connections[name]
        self._toolboxes.pop(name, None)
        if self._current == name:
            self._current = next(iter(self._connections), None)

    def use_connection(self, name: str):
        """
        Select the connection used when none is named.

        Raises:
            ConnectionNotFoundError: If no connection has that name.
        """
        self._require(name)
        self._current = name

    def get_current_connection(self) -> Optional[str]:
        """Get the name of the selected connection."""
        return self._current

    def list_connections(self) -> List[str]:
        """Get the names of every registered connection."""
        return list(self._connections)

    def get_toolbox(self, name: str = None) -> Toolbox:
        """
        Get the toolbox of a connection, building it on first use.

        Args:
            name: The connection name. Defaults to the current connection.

        Returns:
            The toolbox.

        Raises:
            ConnectionNotFoundError: If no connection has that name, or none is registered.
        """
        name = name or self._current
        self._require(name)
        if name not in self._toolboxes:
            settings = self._connections[name]
            self._toolboxes[name] = Toolbox(
                settings["endpoint"], settings["options"], debug=self.debug, formatter=self._formatter
            )
        return self._toolboxes[name]

    def set_debug(self, enabled: bool):
        """Turn tracing on or off for every toolbox."""
        if enabled:
            self.debug.enable()
        else:
            self.debug.disable()

    def set_model_formatter(self, formatter: ModelFormatter):
        """Replace the model formatter of every toolbox, including those already built."""
        self._formatter = formatter
        for toolbox in self._toolboxes.values():
            toolbox.set_model_formatter(formatter)

    def load_config(self, path: str = None):
        """
        Register every connection of a configuration file.

        Args:
            path: A directory or file path. See `paradox.config.configfile.find_config_file`.
        """
        config = load_config(path)
        self.set_debug(config.debug)
        for name in config.connection_names():
            settings = config.get_connection(name)
            endpoint = settings.pop("endpoint")
            self.add_connection(name, endpoint, settings)
        if config.default is not None:
            self.use_connection(config.default)

    def _require(self, name: Optional[str]):
        if name is None:
            raise ConnectionNotFoundError("No connection has been registered.")
        if name not in self._connections:
            raise ConnectionNotFoundError(f"No connection named '{name}' has been registered.")
