##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Paths used when looking for configuration files.
"""
import os


APP_FILENAME = "paradox.yaml"
PARADOX_HOME = os.environ.get("PARADOX_HOME", os.path.join(os.path.expanduser("~"), ".paradox"))
