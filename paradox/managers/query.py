##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
`Query` module for running raw AQL against the toolbox's database.
"""

from typing import Any, Dict, List

from paradox.exceptions import QueryError
from paradox.managers.component import ToolboxComponent


class Query(ToolboxComponent):
    """
    Helper for running AQL queries.

    Methods:
        get_all: Run a query and return every result.
        get_one: Run a query and return the first result.
        explain: Ask the server for the execution plan of a query.
    """

    error_class = QueryError

    def get_all(self, query: str, params: Dict[str, Any] = None) -> List[Any]:
        """
        Run a query and return every result.

        Args:
            query: The AQL query.
            params: The bind parameters.

        Returns:
            The results.

        Raises:
            QueryError: If the server rejects the query.
        """
        with self.driver_errors("run a query"):
            cursor = self.toolbox.get_connection().database.aql.execute(query, bind_vars=params or {})
            return list(cursor)

    def get_one(self, query: str, params: Dict[str, Any] = None) -> Any:
        """
        Run a query and return the first result, or None if there is none.
        """
        results = self.get_all(query, params)
        return results[0] if results else None

    def explain(self, query: str, params: Dict[str, Any] = None) -> Dict[str, Any]:
        """
        Get the execution plan of a query without running it.
        """
        with self.driver_errors("explain a query"):
            return self.toolbox.get_connection().database.aql.explain(query, bind_vars=params or {})
