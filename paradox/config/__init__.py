##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Used to store the application configuration.

The `config` package loads the `paradox.yaml` file describing the connections
Paradox can open and exposes it as a `Config` object.

Modules:
    config_filepaths.py: Where configuration files are looked for.
    configfile.py: Locates, reads and validates configuration files.
"""
from types import SimpleNamespace
from typing import Any, Dict, Optional

from paradox.utils import nested_dict_to_namespaces, nested_namespace_to_dicts


# Pylint complains that there's too few methods here but this class might
# be useful if we ever need to do extra stuff with the configuration so we'll
# ignore it for now
class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all Paradox config settings in one place.

    Attributes:
        debug (bool): Whether server traffic is traced.
        default (Optional[str]): The name of the connection used when none is named.
        connections (SimpleNamespace): One namespace per named connection, each with
            `endpoint` and optionally `username`, `password`, `database` and `graph`.

    Methods:
        __str__: Returns a formatted string representation of the Config instance.
        get_connection: The settings of one named connection as a dict.
        connection_names: The names of every configured connection.
    """

    def __init__(self, app_dict: Dict):
        """
        Initializes the Config instance with configuration data from a dictionary.

        Args:
            app_dict: A dictionary with the keys `debug`, `default` and `connections`.
        """
        app_dict = dict(app_dict or {})
        self.debug: bool = bool(app_dict.get("debug", False))
        self.default: Optional[str] = app_dict.get("default")
        self.connections: SimpleNamespace = nested_dict_to_namespaces(dict(app_dict.get("connections") or {}))

    def __str__(self) -> str:
        """
        Returns a formatted string representation of the Config instance. Passwords are hidden.
        """
        formatted_str = f"config:\n  debug: {self.debug}\n  default: {self.default}\n  connections:"
        for name in self.connection_names():
            formatted_str += f"\n    {name}:"
            for key, value in self.get_connection(name).items():
                if key == "password":
                    value = "******"
                formatted_str += f"\n      {key}: {value!r}"
        return formatted_str

    def connection_names(self):
        """
        Get the names of every configured connection.

        Returns:
            A list of connection names.
        """
        return list(self.connections.__dict__)

    def get_connection(self, name: str) -> Dict[str, Any]:
        """
        Get the settings of a named connection.

        Args:
            name: The connection name.

        Returns:
            The connection settings as a dict.

        Raises:
            KeyError: If no connection has that name.
        """
        if name not in self.connections.__dict__:
            raise KeyError(name)
        return nested_namespace_to_dicts(getattr(self.connections, name))
