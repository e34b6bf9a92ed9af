##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Module of all Paradox-specific exception types.
"""

# Pylint complains that these exceptions are no different from Exception
# but we don't care, we just need new names for exceptions here
# pylint: disable=W0235

__all__ = (
    "ToolboxError",
    "ModeError",
    "OwnershipError",
    "ToolboxConnectionError",
    "ToolboxReleasedError",
    "ConnectionNotFoundError",
    "ComponentError",
    "PodManagerError",
    "FinderError",
    "QueryError",
    "CollectionManagerError",
    "GraphManagerError",
    "DatabaseManagerError",
    "ServerError",
    "TransactionManagerError",
)


class ToolboxError(Exception):
    """
    Base exception for every error raised by Paradox.
    """


class ModeError(ToolboxError):
    """
    Exception to signal that an operation requires a mode (graph or document)
    that the toolbox was not configured for.
    """

    def __init__(self, message: str = "Operation requires graph mode."):
        super().__init__(message)


class OwnershipError(ToolboxError):
    """
    Exception to signal that a pod or model does not belong to the toolbox
    it was handed to.
    """

    def __init__(self, message: str = "The pod/model does not belong to this toolbox."):
        super().__init__(message)


class ToolboxConnectionError(ToolboxError, ConnectionError):
    """
    Exception to signal that the driver rejected the connection options or
    that a connection object could not be constructed.
    """


class ToolboxReleasedError(ToolboxError, ReferenceError):
    """
    Exception to signal that a component outlived the toolbox it belongs to.
    """


class ConnectionNotFoundError(ToolboxError):
    """
    Exception to signal that a named connection was never registered.
    """


class ComponentError(ToolboxError):
    """
    Base exception for failures reported by toolbox components. Carries the
    normalised driver message and code.
    """

    def __init__(self, message: str, code: int = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return str(self.message)
        return f"[{self.code}] {self.message}"


class PodManagerError(ComponentError):
    """
    Exception for failures while storing, loading or deleting pods.
    """


class FinderError(ComponentError):
    """
    Exception for failures while searching for pods.
    """


class QueryError(ComponentError):
    """
    Exception for failures while running AQL queries.
    """


class CollectionManagerError(ComponentError):
    """
    Exception for failures while managing collections.
    """


class GraphManagerError(ComponentError):
    """
    Exception for failures while managing graphs.
    """


class DatabaseManagerError(ComponentError):
    """
    Exception for failures while managing databases.
    """


class ServerError(ComponentError):
    """
    Exception for failures while querying the server or managing users.
    """


class TransactionManagerError(ComponentError):
    """
    Exception for failures while executing transactions.
    """
