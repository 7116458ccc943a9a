"""
SkeletonGraph - Sparse Topological Graph Library

A Python library for storing skeleton-like structures of labelled 3-D points
connected by straight edges. Vertices and edges refer to each other through
stable integer ids, never through direct references.

Main Classes:
    SparseGraph: The graph container (ids, adjacency, removal, transforms)
    pyvertex: Vertex representation in the skeleton
    pyedge: Edge representation between two vertices
    pytransformation: Rigid coordinate-frame transform
    GraphSerializer: Save/load entry points for persistence layers

Example:
    >>> from skeletongraph import SparseGraph, pyvertex, pyedge
    >>> graph = SparseGraph()
    >>> v0 = graph.add_vertex(pyvertex((0.0, 0.0, 0.0)))
    >>> v1 = graph.add_vertex(pyvertex((1.0, 0.0, 0.0)))
    >>> e0 = graph.add_edge(pyedge(v0, v1))
    >>> graph.are_vertices_directly_connected(v0, v1)
    True
"""

__version__ = "0.1.0"
__author__ = "skeletongraph developers"

from skeletongraph.classes.vertex import pyvertex
from skeletongraph.classes.edge import pyedge
from skeletongraph.classes.transformation import pytransformation
from skeletongraph.classes.exceptions import (
    SparseGraphError,
    NotFoundError,
    VertexNotFoundError,
    EdgeNotFoundError,
    GraphConsistencyError,
)
from skeletongraph.core.config import GraphConfig
from skeletongraph.core.graph import SparseGraph
from skeletongraph.operations.serialization import GraphSerializer
from skeletongraph.analysis.consistency import ConsistencyChecker

__all__ = [
    'SparseGraph',
    'GraphConfig',
    'pyvertex',
    'pyedge',
    'pytransformation',
    'GraphSerializer',
    'ConsistencyChecker',
    'SparseGraphError',
    'NotFoundError',
    'VertexNotFoundError',
    'EdgeNotFoundError',
    'GraphConsistencyError',
]
