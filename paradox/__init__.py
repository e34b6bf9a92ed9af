##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Paradox: an object document mapper for the ArangoDB document/graph database.

This module contains the source code for Paradox.
"""

import os


__version__ = "1.3.0"
VERSION = __version__
PATH_TO_PROJ = os.path.join(os.path.dirname(__file__), "")

DEFAULT_DATABASE = "_system"
