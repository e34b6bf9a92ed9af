##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
The `driver` package binds Paradox to python-arango.

Modules:
    connection.py: Translates toolbox configuration into a python-arango client
        and database handle, with optional request tracing.
    handlers.py: Handler objects for documents, graphs, collections, users,
        server administration and transactions, each bound to a connection.
"""
