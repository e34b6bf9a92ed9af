##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import os
from glob import glob
from unittest.mock import MagicMock

import pytest

from tests.fixture_types import FixtureCallable, FixtureStr


# pylint: disable=redefined-outer-name


#######################################
# Loading in Module Specific Fixtures #
#######################################

fixture_dir = os.path.join(os.path.dirname(__file__), "fixtures")
pytest_plugins = [
    f"tests.fixtures.{os.path.splitext(os.path.basename(fixture_file))[0]}"
    for fixture_file in glob(os.path.join(fixture_dir, "*.py"))
    if not fixture_file.endswith("__init__.py")
]


#######################################
######### Fixture Definitions #########
#######################################


@pytest.fixture
def endpoint() -> FixtureStr:
    """
    Fixture to provide the server address used by test toolboxes.

    Returns:
        A server address.
    """
    return "tcp://localhost:8529"


@pytest.fixture
def server_error() -> FixtureCallable:
    """
    Fixture to build python-arango server errors without talking to a server.

    Returns:
        A function taking an `ArangoServerError` subclass, an error message and an
        error code, and returning an instance of that class.
    """

    def _server_error(error_class, message: str, code: int, status_code: int = 400):
        response = MagicMock(
            error_message=message,
            error_code=code,
            status_code=status_code,
            status_text="Bad Request",
            url="http://localhost:8529/_api",
            headers={},
        )
        request = MagicMock(method="get")
        return error_class(response, request)

    return _server_error
