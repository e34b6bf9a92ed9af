##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Tests for the `formatter.py` module.
"""

from unittest.mock import MagicMock

import pytest

from paradox.formatter import DEFAULT_MODEL, DefaultModelFormatter, ModelFormatter, resolve_model_class
from paradox.pod.model import Model


def test_default_formatter():
    """Test that the default formatter picks `Model` for every pod and graph."""
    formatter = DefaultModelFormatter()
    assert formatter.format_model(MagicMock(), None) == DEFAULT_MODEL
    assert formatter.format_model(MagicMock(), "social") == "paradox.pod.model.Model"


def test_formatter_is_abstract():
    """Test that a formatter must implement `format_model`."""
    with pytest.raises(TypeError):
        ModelFormatter()  # pylint: disable=abstract-class-instantiated


def test_resolve_model_class():
    """Test that a dotted path resolves to the class object."""
    assert resolve_model_class(DEFAULT_MODEL) is Model


@pytest.mark.parametrize(
    "path, error",
    [
        ("Model", ValueError),
        ("paradox.no_such_module.Model", ImportError),
        ("paradox.pod.model.NoSuchModel", AttributeError),
    ],
)
def test_resolve_model_class_errors(path: str, error: type):
    """
    Test the errors raised for paths that do not name a class.

    Args:
        path: The dotted path.
        error: The expected exception.
    """
    with pytest.raises(error):
        resolve_model_class(path)
