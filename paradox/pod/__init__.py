##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Pods and models.

A pod is the storage-level representation of a document, vertex or edge. A
model is the user-facing object wrapping a pod. Both expose `get_pod()` so
that anything accepting "a pod or a model" can reach the underlying pod
without inspecting types.

Modules:
    document.py: The `Document`, `Vertex` and `Edge` pods.
    model.py: The `AModel` base wrapper and the default `Model`.
"""
