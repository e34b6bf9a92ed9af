##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
This module defines `ToolboxComponent`, the base class of every component a
toolbox owns.

The toolbox owns its components; components only hold a weak reference back
to it, so a toolbox and its components never form a reference cycle.
"""

from __future__ import annotations

import logging
import weakref
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Type

from arango.exceptions import ArangoError

from paradox.exceptions import ComponentError, ToolboxReleasedError


if TYPE_CHECKING:
    from paradox.toolbox import Toolbox


LOG = logging.getLogger(__name__)


class ToolboxComponent:
    """
    Base class for components owned by a toolbox.

    Attributes:
        error_class (Type[ComponentError]): The error raised when the driver fails.

    Methods:
        toolbox: The toolbox this component belongs to.
        driver_errors: Context manager turning driver failures into `error_class`.
    """

    error_class: Type[ComponentError] = ComponentError

    def __init__(self, toolbox: Toolbox):
        """
        Initialize the component.

        Args:
            toolbox: The toolbox that owns this component.
        """
        self._toolbox_ref = weakref.ref(toolbox)

    @property
    def toolbox(self) -> Toolbox:
        """
        The toolbox this component belongs to.

        Raises:
            ToolboxReleasedError: If the toolbox no longer exists.
        """
        toolbox = self._toolbox_ref()
        if toolbox is None:
            raise ToolboxReleasedError(f"The toolbox owning this {self.__class__.__name__} no longer exists.")
        return toolbox

    @contextmanager
    def driver_errors(self, action: str) -> Iterator[None]:
        """
        Turn driver failures raised inside the block into `error_class`.

        Args:
            action: A short description of what was attempted, used in the log line.

        Raises:
            ComponentError: The `error_class` of this component, carrying the
                normalised message and code of the driver failure.
        """
        try:
            yield
        except ArangoError as exc:
            normalised = self.toolbox.normalise_driver_exceptions(exc)
            LOG.debug(f"{self.__class__.__name__} failed to {action}: {normalised['message']}")
            raise self.error_class(normalised["message"], normalised["code"]) from exc
