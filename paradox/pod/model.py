##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
User-facing models wrapping pods.

Subclass `AModel` to attach behaviour to documents. Fields of the wrapped pod
can be read and written as attributes:

    user = pod_manager.dispense("users")
    user.name = "alice"
    pod_manager.store(user)
"""

from typing import Any

from paradox.pod.document import Document


class AModel:
    """
    Base class for models.

    Attribute access that does not hit a real attribute is forwarded to the
    fields of the wrapped pod.

    Methods:
        get_pod: Get the wrapped pod.
        get_id: Get the id of the wrapped pod.
        get_key: Get the key of the wrapped pod.
        get: Read a field of the wrapped pod.
        set: Write a field of the wrapped pod.
    """

    def __init__(self, pod: Document):
        object.__setattr__(self, "_pod", pod)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._pod!r})"

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._pod.get(name)

    def __setattr__(self, name: str, value: Any):
        if name.startswith("_") or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self._pod.set(name, value)

    def get_pod(self) -> Document:
        """Get the wrapped pod."""
        return self._pod

    def get_id(self):
        """Get the id of the wrapped pod."""
        return self._pod.get_id()

    def get_key(self):
        """Get the key of the wrapped pod."""
        return self._pod.get_key()

    def get(self, field: str, default: Any = None) -> Any:
        """Read a field of the wrapped pod."""
        return self._pod.get(field, default)

    def set(self, field: str, value: Any):
        """Write a field of the wrapped pod."""
        self._pod.set(field, value)


class Model(AModel):
    """
    The model used when the formatter has nothing more specific.
    """
