##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
`Finder` module for looking pods up.

Filters are AQL expressions over the variable `doc`, for example
`doc.age > @age`. The finder adds its own bind parameter for the collection
and makes sure it never collides with a parameter supplied by the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from paradox.exceptions import FinderError
from paradox.managers.component import ToolboxComponent
from paradox.pod.model import AModel


LOG = logging.getLogger(__name__)


class Finder(ToolboxComponent):
    """
    Look pods up by id or by filter.

    Methods:
        load_by_id: Load a model given its `collection/key` id.
        find: Find every model of a type matching a filter.
        find_one: Find the first model of a type matching a filter.
        find_all: Find every model of a type.
        any: Find a random model of a type matching a filter.
    """

    error_class = FinderError

    def load_by_id(self, id: str) -> Optional[AModel]:  # pylint: disable=redefined-builtin
        """
        Load a model given its id.

        Args:
            id: The id in `collection/key` form.

        Returns:
            The model, or None if the id is malformed or no document matches.
        """
        toolbox = self.toolbox
        parsed = toolbox.parse_id(id)
        if not parsed["key"]:
            LOG.debug(f"'{id}' is not a valid id; nothing to load.")
            return None
        pod_manager = toolbox.get_pod_manager()
        return pod_manager.load(pod_manager.get_type_for_collection(parsed["collection"]), parsed["key"])

    def _build_query(
        self, type: str, filter: str, params: Dict[str, Any], suffix: str = ""  # pylint: disable=redefined-builtin
    ) -> Tuple[str, Dict[str, Any]]:
        toolbox = self.toolbox
        params = dict(params or {})
        collection_param = toolbox.generate_binding_parameter("@collection", params)
        params[collection_param] = toolbox.get_pod_manager().get_collection_name(type)

        query = f"FOR doc IN @{collection_param}"
        if filter:
            query += f" FILTER {filter}"
        if suffix:
            query += f" {suffix}"
        query += " RETURN doc"
        return query, params

    def _run(self, type: str, query: str, params: Dict[str, Any]) -> List[AModel]:  # pylint: disable=redefined-builtin
        pod_manager = self.toolbox.get_pod_manager()
        with self.driver_errors(f"find '{type}' pods"):
            cursor = self.toolbox.get_connection().database.aql.execute(query, bind_vars=params)
            return [pod_manager.to_model(pod_manager.create_pod(type, data)) for data in cursor]

    def find(
        self, type: str, filter: str, params: Dict[str, Any] = None  # pylint: disable=redefined-builtin
    ) -> List[AModel]:
        """
        Find every model of a type matching a filter.

        Args:
            type: The pod type.
            filter: An AQL expression over `doc`.
            params: Bind parameters used by the filter.

        Returns:
            The matching models.
        """
        query, params = self._build_query(type, filter, params)
        return self._run(type, query, params)

    def find_one(
        self, type: str, filter: str, params: Dict[str, Any] = None  # pylint: disable=redefined-builtin
    ) -> Optional[AModel]:
        """
        Find the first model of a type matching a filter, or None.
        """
        query, params = self._build_query(type, filter, params, suffix="LIMIT 1")
        results = self._run(type, query, params)
        return results[0] if results else None

    def find_all(self, type: str, params: Dict[str, Any] = None) -> List[AModel]:  # pylint: disable=redefined-builtin
        """
        Find every model of a type.
        """
        query, params = self._build_query(type, None, params)
        return self._run(type, query, params)

    def any(
        self, type: str, filter: str = None, params: Dict[str, Any] = None  # pylint: disable=redefined-builtin
    ) -> Optional[AModel]:
        """
        Find a random model of a type, optionally matching a filter, or None.
        """
        query, params = self._build_query(type, filter, params, suffix="SORT RAND() LIMIT 1")
        results = self._run(type, query, params)
        return results[0] if results else None
