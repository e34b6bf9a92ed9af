##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Model formatters decide which model class wraps a pod.

A formatter is consulted every time Paradox turns a pod into a model. It
receives the pod and the graph name of the toolbox (None for toolboxes that
work on plain documents) and answers with the dotted path of a model class.
"""

import importlib
import logging
from abc import ABC, abstractmethod
from typing import Optional, Type


LOG = logging.getLogger(__name__)

DEFAULT_MODEL = "paradox.pod.model.Model"


class ModelFormatter(ABC):
    """
    Abstract base class for model formatters.

    Methods:
        format_model: Return the dotted path of the model class for a pod.
    """

    @abstractmethod
    def format_model(self, pod, graph_name: Optional[str]) -> str:
        """
        Select the model class for a pod.

        Args:
            pod: The pod that needs a model.
            graph_name: The graph the toolbox works on, or None.

        Returns:
            The dotted path of the model class, e.g. `paradox.pod.model.Model`.
        """
        raise NotImplementedError("Subclasses of `ModelFormatter` must implement a `format_model` method.")


class DefaultModelFormatter(ModelFormatter):
    """
    Formatter that wraps every pod in `paradox.pod.model.Model`.
    """

    def format_model(self, pod, graph_name: Optional[str]) -> str:
        return DEFAULT_MODEL


def resolve_model_class(path: str) -> Type:
    """
    Import and return the class named by a dotted path.

    Args:
        path: A dotted path such as `myapp.models.User`.

    Returns:
        The class object.

    Raises:
        ValueError: If `path` is not a dotted path.
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no such class.
    """
    module_name, _, class_name = path.rpartition(".")
    if not module_name:
        raise ValueError(f"'{path}' is not a dotted path to a model class.")
    LOG.debug(f"Resolving model class '{class_name}' from '{module_name}'.")
    module = importlib.import_module(module_name)
    return getattr(module, class_name)
