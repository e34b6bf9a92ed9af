##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Module for project-wide utility functions.
"""

import logging
from types import SimpleNamespace
from typing import Any, Dict

import yaml


LOG = logging.getLogger(__name__)


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def nested_dict_to_namespaces(dic: Dict) -> SimpleNamespace:
    """
    Convert a nested dictionary into a nested SimpleNamespace structure.

    Args:
        dic: The nested dictionary to be converted.

    Returns:
        A SimpleNamespace object representing the nested structure of the input dictionary.

    Raises:
        TypeError: If the input is not a dictionary.
    """

    def recurse(dic):
        if not isinstance(dic, dict):
            return dic
        for key, val in list(dic.items()):
            dic[key] = recurse(val)
        return SimpleNamespace(**dic)

    if not isinstance(dic, dict):
        raise TypeError(f"Cannot convert {type(dic)} to SimpleNamespace.")

    return recurse(dic)


def nested_namespace_to_dicts(namespaces: SimpleNamespace) -> Dict[str, Any]:
    """
    Convert a nested SimpleNamespace structure back into a nested dictionary.

    Args:
        namespaces: The SimpleNamespace to convert.

    Returns:
        A dictionary with the same nesting as `namespaces`.

    Raises:
        TypeError: If the input is not a SimpleNamespace.
    """

    def recurse(namespaces):
        if not isinstance(namespaces, SimpleNamespace):
            return namespaces
        return {key: recurse(val) for key, val in namespaces.__dict__.items()}

    if not isinstance(namespaces, SimpleNamespace):
        raise TypeError(f"Cannot convert {type(namespaces)} to dict.")

    return recurse(namespaces)
