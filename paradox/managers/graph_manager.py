##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
`GraphManager` module for the graph of a graph-mode toolbox.

The graph is made of a single vertex collection and a single edge collection,
named after the graph (see `Toolbox.get_vertex_collection_name` and
`Toolbox.get_edge_collection_name`). Every method here requires graph mode.
"""

import logging
from typing import Any, Dict

from paradox.exceptions import GraphManagerError
from paradox.managers.component import ToolboxComponent


LOG = logging.getLogger(__name__)


class GraphManager(ToolboxComponent):
    """
    Manager class for the toolbox's graph.

    Methods:
        create_graph: Create the graph with its vertex and edge collections.
        delete_graph: Delete the graph and its collections.
        has_graph: Check whether the graph exists.
        get_graph_info: Get the properties of the graph.
    """

    error_class = GraphManagerError

    def create_graph(self) -> bool:
        """
        Create the graph along with its vertex and edge collections.

        Returns:
            True once the graph exists.

        Raises:
            ModeError: If the toolbox does not manage a graph.
            GraphManagerError: If the server rejects the request.
        """
        toolbox = self.toolbox
        vertex_collection = toolbox.get_vertex_collection_name()
        edge_definitions = [
            {
                "edge_collection": toolbox.get_edge_collection_name(),
                "from_vertex_collections": [vertex_collection],
                "to_vertex_collections": [vertex_collection],
            }
        ]
        with self.driver_errors(f"create graph '{toolbox.get_graph()}'"):
            toolbox.get_graph_handler().create_graph(toolbox.get_graph(), edge_definitions=edge_definitions)
        LOG.info(f"Created graph '{toolbox.get_graph()}'.")
        return True

    def delete_graph(self) -> bool:
        """
        Delete the graph and drop its collections.

        Raises:
            ModeError: If the toolbox does not manage a graph.
            GraphManagerError: If the server rejects the request.
        """
        toolbox = self.toolbox
        self._require_graph()
        with self.driver_errors(f"delete graph '{toolbox.get_graph()}'"):
            deleted = toolbox.get_graph_handler().delete_graph(toolbox.get_graph(), drop_collections=True)
        LOG.info(f"Deleted graph '{toolbox.get_graph()}'.")
        return deleted

    def has_graph(self) -> bool:
        """Check whether the graph exists on the server."""
        self._require_graph()
        with self.driver_errors(f"look up graph '{self.toolbox.get_graph()}'"):
            return self.toolbox.get_graph_handler().has_graph(self.toolbox.get_graph())

    def get_graph_info(self) -> Dict[str, Any]:
        """Get the properties of the graph."""
        self._require_graph()
        with self.driver_errors(f"read the properties of graph '{self.toolbox.get_graph()}'"):
            return self.toolbox.get_graph_handler().properties(self.toolbox.get_graph())

    def _require_graph(self):
        # Raises ModeError in document mode
        self.toolbox.get_vertex_collection_name()
