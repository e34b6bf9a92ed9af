##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Components owned by a toolbox.

Every component is created once by the `Toolbox` constructor and keeps a weak
reference back to it.

Modules:
    component.py: The `ToolboxComponent` base class.
    pod_manager.py: Dispense, store, load and delete pods.
    finder.py: Look pods up by id or by AQL filter.
    query.py: Run raw AQL.
    collection_manager.py: Create, drop and inspect collections.
    graph_manager.py: Create and drop the graph of a graph-mode toolbox.
    database_manager.py: Create, drop and switch databases.
    server.py: Server information and user administration.
    transaction_manager.py: Run server-side transactions.
"""
