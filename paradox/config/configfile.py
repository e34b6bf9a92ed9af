##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
This module provides functionality for locating, loading and validating
Paradox configuration files.

A configuration file looks like:

    debug: false
    default: main
    connections:
      main:
        endpoint: tcp://localhost:8529
        username: root
        password: secret
        database: _system
      social:
        endpoint: tcp://localhost:8529
        graph: social
"""
import logging
import os
from typing import Dict

from paradox.config import Config
from paradox.config.config_filepaths import APP_FILENAME, PARADOX_HOME
from paradox.utils import load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

CONNECTION_KEYS = ("endpoint", "username", "password", "database", "graph")


def find_config_file(path: str = None) -> str:
    """
    Locate the Paradox configuration file.

    Looks in `path` if given; otherwise in the current working directory and
    then in `PARADOX_HOME`.

    Args:
        path: A directory, or a path to the file itself.

    Returns:
        The path to the configuration file, or None if there is none.
    """
    if path is not None:
        if os.path.isfile(path):
            return path
        candidate = os.path.join(path, APP_FILENAME)
        return candidate if os.path.isfile(candidate) else None

    for directory in (os.getcwd(), PARADOX_HOME):
        candidate = os.path.join(directory, APP_FILENAME)
        if os.path.isfile(candidate):
            return candidate
    return None


def validate_config(app_dict: Dict):
    """
    Check the structure of a loaded configuration.

    Args:
        app_dict: The contents of the configuration file.

    Raises:
        ValueError: If a connection has no endpoint, has unknown keys, or the
            default connection is not defined.
    """
    connections = app_dict.get("connections") or {}
    if not isinstance(connections, dict):
        raise ValueError("'connections' must be a mapping of connection names to settings.")
    for name, settings in connections.items():
        if not isinstance(settings, dict) or not settings.get("endpoint"):
            raise ValueError(f"Connection '{name}' needs an 'endpoint'.")
        unknown = set(settings) - set(CONNECTION_KEYS)
        if unknown:
            raise ValueError(f"Connection '{name}' has unknown settings: {', '.join(sorted(unknown))}.")
    default = app_dict.get("default")
    if default is not None and default not in connections:
        raise ValueError(f"The default connection '{default}' is not defined.")


def load_config(path: str = None) -> Config:
    """
    Locate, read and validate a configuration file.

    Args:
        path: A directory, or a path to the file itself.

    Returns:
        The configuration.

    Raises:
        FileNotFoundError: If no configuration file can be found.
        ValueError: If the file is malformed.
    """
    filepath = find_config_file(path)
    if filepath is None:
        raise FileNotFoundError(f"Could not find a '{APP_FILENAME}' configuration file.")
    LOG.info(f"Reading Paradox config from file {filepath}")
    app_dict = load_yaml(filepath) or {}
    if not isinstance(app_dict, dict):
        raise ValueError(f"{filepath} does not contain a mapping.")
    validate_config(app_dict)
    return Config(app_dict)
