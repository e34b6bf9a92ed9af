##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Storage pods for documents, vertices and edges.
"""

import copy
from typing import Any, Dict, Optional


METADATA_FIELDS = ("_id", "_key", "_rev")
ENDPOINT_FIELDS = ("_from", "_to")
RESERVED_FIELDS = METADATA_FIELDS + ENDPOINT_FIELDS


class Document:
    """
    The storage-level representation of a document.

    A pod remembers the toolbox that created it. Ownership is checked by
    identity, so a pod built by one toolbox is never accepted by another, even
    if both toolboxes point at the same server.

    Attributes:
        type (str): The collection the document lives in.

    Methods:
        get_pod: Return the pod itself.
        get_toolbox: Return the toolbox that owns this pod.
        compare_toolbox: Check whether a toolbox is the owner of this pod.
        get_id: Get the document id (`collection/key`).
        get_key: Get the document key.
        get_revision: Get the document revision.
        get: Read a field.
        set: Write a field.
        remove: Delete a field.
        set_saved: Record the metadata returned by the server after a save.
        is_new: Whether the pod was never saved.
        is_changed: Whether the pod has unsaved changes.
        to_dict: The document body sent to the server.
    """

    def __init__(self, toolbox, type: str, data: Dict[str, Any] = None):  # pylint: disable=redefined-builtin
        """
        Create a pod.

        Args:
            toolbox: The toolbox that owns the pod.
            type: The collection the document lives in.
            data: Initial document body. `_id`, `_key` and `_rev` are taken as
                metadata, everything else as user data. Endpoints of a document
                read from an edge collection stay in the body, read-only.
        """
        self._toolbox = toolbox
        self.type = type
        self._id: Optional[str] = None
        self._key: Optional[str] = None
        self._rev: Optional[str] = None
        self._data: Dict[str, Any] = {}
        self._changed = False
        self._load(data or {})

    def _load(self, data: Dict[str, Any]):
        self._id = data.get("_id")
        self._key = data.get("_key")
        self._rev = data.get("_rev")
        self._data = {key: value for key, value in data.items() if key not in METADATA_FIELDS}
        self._changed = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type!r}, id={self._id!r})"

    def get_pod(self) -> "Document":
        """
        Return the pod itself. Models implement the same method to expose the
        pod they wrap.
        """
        return self

    def get_toolbox(self):
        """Return the toolbox that owns this pod."""
        return self._toolbox

    def compare_toolbox(self, toolbox) -> bool:
        """
        Check whether `toolbox` is the exact toolbox that owns this pod.

        Args:
            toolbox: The toolbox to compare against.

        Returns:
            True if `toolbox` is the owner, False otherwise.
        """
        return self._toolbox is toolbox

    def get_id(self) -> Optional[str]:
        """Get the document id (`collection/key`), or None if the pod was never saved."""
        return self._id

    def get_key(self) -> Optional[str]:
        """Get the document key, or None if the pod was never saved."""
        return self._key

    def get_revision(self) -> Optional[str]:
        """Get the document revision, or None if the pod was never saved."""
        return self._rev

    def get(self, field: str, default: Any = None) -> Any:
        """Read a field."""
        return self._data.get(field, default)

    def set(self, field: str, value: Any):
        """
        Write a field.

        Raises:
            ValueError: If `field` is a reserved field.
        """
        if field in RESERVED_FIELDS:
            raise ValueError(f"'{field}' is managed by the server and cannot be set.")
        self._data[field] = value
        self._changed = True

    def remove(self, field: str):
        """
        Delete a field if it exists.

        Raises:
            ValueError: If `field` is a reserved field.
        """
        if field in RESERVED_FIELDS:
            raise ValueError(f"'{field}' is managed by the server and cannot be removed.")
        if field in self._data:
            del self._data[field]
            self._changed = True

    def set_saved(self, meta: Dict[str, Any]):
        """
        Record the metadata returned by the server after a save.

        Args:
            meta: A dictionary with `_id`, `_key` and `_rev`.
        """
        self._id = meta.get("_id", self._id)
        self._key = meta.get("_key", self._key)
        self._rev = meta.get("_rev", self._rev)
        self._changed = False

    def is_new(self) -> bool:
        """Whether the pod was never saved."""
        return self._id is None

    def is_changed(self) -> bool:
        """Whether the pod has unsaved changes."""
        return self._changed or self.is_new()

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the document body sent to the server.

        Returns:
            The user data plus the metadata known so far.
        """
        body = copy.deepcopy(self._data)
        if self._key is not None:
            body["_key"] = self._key
        if self._id is not None:
            body["_id"] = self._id
        if self._rev is not None:
            body["_rev"] = self._rev
        return body


class Vertex(Document):
    """
    A document stored in the vertex collection of a graph.
    """


class Edge(Document):
    """
    A document stored in the edge collection of a graph, linking two vertices.
    """

    def _load(self, data: Dict[str, Any]):
        super()._load(data)
        self._from: Optional[str] = self._data.pop("_from", None)
        self._to: Optional[str] = self._data.pop("_to", None)

    def get_from(self) -> Optional[str]:
        """Get the id of the vertex the edge starts at."""
        return self._from

    def get_to(self) -> Optional[str]:
        """Get the id of the vertex the edge ends at."""
        return self._to

    def set_from(self, vertex_id: str):
        """Set the id of the vertex the edge starts at."""
        self._from = vertex_id
        self._changed = True

    def set_to(self, vertex_id: str):
        """Set the id of the vertex the edge ends at."""
        self._to = vertex_id
        self._changed = True

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self._from is not None:
            body["_from"] = self._from
        if self._to is not None:
            body["_to"] = self._to
        return body
