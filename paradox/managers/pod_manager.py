##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
`PodManager` module for creating, storing, loading and deleting pods.

In document mode pods are documents in the collection named by their type. In
graph mode the only types are `vertex` and `edge`; they live in the vertex and
edge collections of the toolbox's graph.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from paradox.exceptions import PodManagerError
from paradox.formatter import resolve_model_class
from paradox.managers.component import ToolboxComponent
from paradox.pod.document import Document, Edge, Vertex
from paradox.pod.model import AModel


LOG = logging.getLogger(__name__)

VERTEX = "vertex"
EDGE = "edge"


class PodManager(ToolboxComponent):
    """
    Manager class for pods.

    Methods:
        get_collection_name: The collection holding pods of a type.
        get_type_for_collection: The pod type stored in a collection.
        create_pod: Build a pod of a type from a document body.
        to_model: Wrap a pod in the model the formatter selects.
        dispense: Create a new, unsaved model.
        store: Save a model.
        load: Load a model by type and key.
        delete: Delete a model.
    """

    error_class = PodManagerError

    def get_collection_name(self, type: str) -> str:  # pylint: disable=redefined-builtin
        """
        Get the collection that holds pods of a type.

        Args:
            type: The pod type. In graph mode, `vertex` or `edge`.

        Returns:
            The collection name.

        Raises:
            PodManagerError: If the type is not valid for a graph-mode toolbox.
        """
        toolbox = self.toolbox
        if not toolbox.is_graph():
            return type
        if type == VERTEX:
            return toolbox.get_vertex_collection_name()
        if type == EDGE:
            return toolbox.get_edge_collection_name()
        raise PodManagerError(f"Graph '{toolbox.get_graph()}' only holds '{VERTEX}' and '{EDGE}' pods, not '{type}'.")

    def get_type_for_collection(self, collection: str) -> str:
        """
        Get the pod type stored in a collection.

        Args:
            collection: The collection name.

        Returns:
            The pod type.
        """
        toolbox = self.toolbox
        if not toolbox.is_graph():
            return collection
        return EDGE if collection == toolbox.get_edge_collection_name() else VERTEX

    def _is_edge(self, pod: Document) -> bool:
        return self.toolbox.is_graph() and pod.type == self.toolbox.get_edge_collection_name()

    def create_pod(self, type: str, data: Dict[str, Any] = None) -> Document:  # pylint: disable=redefined-builtin
        """
        Build a pod owned by this toolbox.

        Args:
            type: The pod type.
            data: The document body, if the pod was loaded from the server.

        Returns:
            A `Document` in document mode, a `Vertex` or `Edge` in graph mode.
        """
        collection = self.get_collection_name(type)
        if not self.toolbox.is_graph():
            return Document(self.toolbox, collection, data)
        if type == EDGE:
            return Edge(self.toolbox, collection, data)
        return Vertex(self.toolbox, collection, data)

    def to_model(self, pod: Document) -> AModel:
        """
        Wrap a pod in the model selected by the toolbox's formatter.

        Args:
            pod: The pod.

        Returns:
            The model.
        """
        model_class = resolve_model_class(self.toolbox.format_model(pod))
        return model_class(pod)

    def dispense(self, type: str) -> AModel:  # pylint: disable=redefined-builtin
        """
        Create a new model that has not been saved yet.

        Args:
            type: The pod type.

        Returns:
            The model.
        """
        return self.to_model(self.create_pod(type))

    def store(self, model: AModel) -> str:
        """
        Save a model, inserting it if it is new and updating it otherwise.

        Args:
            model: The model (or pod) to save.

        Returns:
            The id of the saved document.

        Raises:
            OwnershipError: If the model belongs to another toolbox.
            PodManagerError: If the server rejects the save.
        """
        toolbox = self.toolbox
        toolbox.validate_pod(model)
        pod = model.get_pod()
        driver = toolbox.get_driver()
        body = pod.to_dict()

        with self.driver_errors(f"store a pod in '{pod.type}'"):
            if not toolbox.is_graph():
                meta = driver.save(pod.type, body) if pod.is_new() else driver.update(pod.type, body)
            elif self._is_edge(pod):
                if pod.get_from() is None or pod.get_to() is None:
                    raise PodManagerError("An edge needs both a 'from' and a 'to' vertex before it can be stored.")
                graph = toolbox.get_graph()
                meta = driver.save_edge(graph, pod.type, body) if pod.is_new() else driver.update_edge(graph, body)
            else:
                graph = toolbox.get_graph()
                meta = driver.save_vertex(graph, pod.type, body) if pod.is_new() else driver.update_vertex(graph, body)

        pod.set_saved(meta)
        LOG.debug(f"Stored pod '{pod.get_id()}'.")
        return pod.get_id()

    def load(self, type: str, key: str) -> Optional[AModel]:  # pylint: disable=redefined-builtin
        """
        Load a model by type and key.

        Args:
            type: The pod type.
            key: The document key.

        Returns:
            The model, or None if no such document exists.

        Raises:
            PodManagerError: If the server rejects the lookup.
        """
        toolbox = self.toolbox
        collection = self.get_collection_name(type)
        driver = toolbox.get_driver()

        with self.driver_errors(f"load '{collection}/{key}'"):
            if not toolbox.is_graph():
                data = driver.get(collection, key)
            elif type == EDGE:
                data = driver.get_edge(toolbox.get_graph(), f"{collection}/{key}")
            else:
                data = driver.get_vertex(toolbox.get_graph(), f"{collection}/{key}")

        if data is None:
            return None
        return self.to_model(self.create_pod(type, data))

    def delete(self, model: AModel) -> bool:
        """
        Delete a model from the server.

        Args:
            model: The model (or pod) to delete.

        Returns:
            True if the document was deleted.

        Raises:
            OwnershipError: If the model belongs to another toolbox.
            PodManagerError: If the model was never saved or the server rejects the delete.
        """
        toolbox = self.toolbox
        toolbox.validate_pod(model)
        pod = model.get_pod()
        if pod.is_new():
            raise PodManagerError("Cannot delete a pod that was never stored.")
        driver = toolbox.get_driver()

        with self.driver_errors(f"delete '{pod.get_id()}'"):
            if not toolbox.is_graph():
                return driver.remove(pod.type, pod.get_key())
            if self._is_edge(pod):
                return driver.remove_edge(toolbox.get_graph(), pod.get_id())
            return driver.remove_vertex(toolbox.get_graph(), pod.get_id())
