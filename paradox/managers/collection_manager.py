##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
`CollectionManager` module for creating, dropping and inspecting collections.
"""

import logging
from typing import Any, Dict, List

from paradox.exceptions import CollectionManagerError
from paradox.managers.component import ToolboxComponent


LOG = logging.getLogger(__name__)


class CollectionManager(ToolboxComponent):
    """
    Manager class for collections.

    Methods:
        create_collection: Create a collection.
        delete_collection: Drop a collection.
        truncate: Remove every document from a collection.
        count: Count the documents in a collection.
        has_collection: Check whether a collection exists.
        list_collections: List collection names.
        get_collection_info: Get the properties of a collection.
    """

    error_class = CollectionManagerError

    def create_collection(self, name: str, edge: bool = False, **options: Any) -> bool:
        """
        Create a collection.

        Args:
            name: The collection name.
            edge: Whether to create an edge collection.
            **options: Extra python-arango `create_collection` options.

        Returns:
            True once the collection exists.

        Raises:
            CollectionManagerError: If the server rejects the request.
        """
        with self.driver_errors(f"create collection '{name}'"):
            self.toolbox.get_collection_handler().create(name, edge=edge, **options)
        LOG.info(f"Created collection '{name}'.")
        return True

    def delete_collection(self, name: str) -> bool:
        """
        Drop a collection.

        Raises:
            CollectionManagerError: If the collection does not exist or the server rejects the request.
        """
        with self.driver_errors(f"delete collection '{name}'"):
            deleted = self.toolbox.get_collection_handler().drop(name)
        LOG.info(f"Deleted collection '{name}'.")
        return deleted

    def truncate(self, name: str) -> bool:
        """Remove every document from a collection."""
        with self.driver_errors(f"truncate collection '{name}'"):
            return self.toolbox.get_collection_handler().truncate(name)

    def count(self, name: str) -> int:
        """Count the documents in a collection."""
        with self.driver_errors(f"count collection '{name}'"):
            return self.toolbox.get_collection_handler().count(name)

    def has_collection(self, name: str) -> bool:
        """Check whether a collection exists."""
        with self.driver_errors(f"look up collection '{name}'"):
            return self.toolbox.get_collection_handler().has(name)

    def list_collections(self, include_system: bool = False) -> List[str]:
        """List collection names, leaving out system collections unless asked."""
        with self.driver_errors("list collections"):
            return self.toolbox.get_collection_handler().list(include_system=include_system)

    def get_collection_info(self, name: str) -> Dict[str, Any]:
        """Get the properties of a collection."""
        with self.driver_errors(f"read the properties of collection '{name}'"):
            return self.toolbox.get_collection_handler().properties(name)
