"""
Sparse topological graph of a 3-D skeleton.

This module provides the fundamental graph structure: id allocation, the
vertex and edge stores and the adjacency bookkeeping between them.
"""

import logging
from typing import Callable, Dict, List, Optional

import numpy as np

from ..classes.vertex import pyvertex, as_point
from ..classes.edge import pyedge
from ..classes.exceptions import VertexNotFoundError, EdgeNotFoundError
from .config import GraphConfig

logger = logging.getLogger(__name__)


class SparseGraph:
    """
    Sparse graph of skeleton vertices connected by straight edges.

    Vertices and edges never hold references to each other, only integer
    ids resolved through this container. It manages:
    - Vertex and edge ID allocation
    - Adjacency list maintenance on both endpoints of every edge
    - Cascading removal of edges with their vertices
    - Bulk coordinate-frame transforms
    - Insertion of previously serialized entities under their own ids

    Not thread safe: callers must own the graph exclusively while mutating it.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config: Optional graph configuration, defaults are used if omitted
        """
        self.config = config if config is not None else GraphConfig()

        self.lVertexID_next = 0
        self.lEdgeID_next = 0

        self.vertex_map: Dict[int, pyvertex] = {}
        self.edge_map: Dict[int, pyedge] = {}

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    def add_vertex(self, vertex: pyvertex) -> int:
        """
        Add a vertex under a freshly allocated ID.

        The graph stores a copy; the caller's object is left untouched.

        Args:
            vertex: Vertex to add, its lVertexID is ignored

        Returns:
            The allocated vertex ID
        """
        lVertexID = self.lVertexID_next
        self.lVertexID_next += 1

        pVertex = vertex.copy()
        pVertex.lVertexID = lVertexID
        if pVertex.aEdgeID:
            logger.warning(f"Dropping {len(pVertex.aEdgeID)} stale edge ids from new vertex {lVertexID}")
            pVertex.aEdgeID = []

        self.vertex_map[lVertexID] = pVertex
        logger.debug(f"Added vertex {lVertexID} at {pVertex.pPoint.tolist()}")
        return lVertexID

    def add_edge(self, edge: pyedge) -> int:
        """
        Add an edge under a freshly allocated ID and hook it up to its vertices.

        The new ID is appended to the adjacency list of both endpoints, and
        the current endpoint coordinates are cached on the stored edge.

        Args:
            edge: Edge to add, its lEdgeID and cached points are ignored

        Returns:
            The allocated edge ID

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph
        """
        # Check both endpoints before consuming an id
        pVertex_start = self.get_vertex(edge.lVertexID_start)
        pVertex_end = self.get_vertex(edge.lVertexID_end)

        lEdgeID = self.lEdgeID_next
        self.lEdgeID_next += 1

        pEdge = edge.copy()
        pEdge.lEdgeID = lEdgeID
        pEdge.pPoint_start = pVertex_start.pPoint.copy()
        pEdge.pPoint_end = pVertex_end.pPoint.copy()
        self.edge_map[lEdgeID] = pEdge

        pVertex_start.aEdgeID.append(lEdgeID)
        pVertex_end.aEdgeID.append(lEdgeID)

        logger.debug(f"Added edge {lEdgeID}: {pEdge.lVertexID_start} -> {pEdge.lVertexID_end}")
        return lEdgeID

    # ========================================================================
    # QUERIES
    # ========================================================================

    def has_vertex(self, lVertexID: int) -> bool:
        return lVertexID in self.vertex_map

    def has_edge(self, lEdgeID: int) -> bool:
        return lEdgeID in self.edge_map

    def get_vertex(self, lVertexID: int) -> pyvertex:
        """
        Get a vertex by ID.

        The stored vertex is returned, so edits are visible to the graph.

        Raises:
            VertexNotFoundError: If the ID is not in the graph
        """
        try:
            return self.vertex_map[lVertexID]
        except KeyError:
            raise VertexNotFoundError(lVertexID) from None

    def get_edge(self, lEdgeID: int) -> pyedge:
        """
        Get an edge by ID.

        Raises:
            EdgeNotFoundError: If the ID is not in the graph
        """
        try:
            return self.edge_map[lEdgeID]
        except KeyError:
            raise EdgeNotFoundError(lEdgeID) from None

    def get_all_vertex_ids(self) -> List[int]:
        """Get the IDs of all live vertices in ascending order."""
        return sorted(self.vertex_map.keys())

    def get_all_edge_ids(self) -> List[int]:
        """Get the IDs of all live edges in ascending order."""
        return sorted(self.edge_map.keys())

    def get_vertex_count(self) -> int:
        return len(self.vertex_map)

    def get_edge_count(self) -> int:
        return len(self.edge_map)

    def get_vertex_map(self) -> Dict[int, pyvertex]:
        """Shallow copy of the vertex store, keyed by vertex ID."""
        return dict(self.vertex_map)

    def get_edge_map(self) -> Dict[int, pyedge]:
        """Shallow copy of the edge store, keyed by edge ID."""
        return dict(self.edge_map)

    def get_next_vertex_id(self) -> int:
        return self.lVertexID_next

    def get_next_edge_id(self) -> int:
        return self.lEdgeID_next

    def are_vertices_directly_connected(self, lVertexID_1: int, lVertexID_2: int) -> bool:
        """
        Check whether a single edge joins two vertices.

        Cost is proportional to the degree of the first vertex.

        Args:
            lVertexID_1: First vertex ID, must be in the graph
            lVertexID_2: Second vertex ID

        Returns:
            True if any edge of the first vertex ends at the second one

        Raises:
            VertexNotFoundError: If the first vertex is not in the graph
        """
        pVertex_1 = self.get_vertex(lVertexID_1)
        for lEdgeID in pVertex_1.aEdgeID:
            pEdge = self.get_edge(lEdgeID)
            if pEdge.lVertexID_start == lVertexID_2 or pEdge.lVertexID_end == lVertexID_2:
                return True
        return False

    # ========================================================================
    # REMOVAL
    # ========================================================================

    def remove_vertex(self, lVertexID: int) -> None:
        """
        Remove a vertex together with every edge incident to it.

        Does nothing if the vertex is not in the graph.

        Raises:
            VertexNotFoundError: If an incident edge has a missing endpoint,
                in which case the graph is left unchanged
        """
        pVertex = self.vertex_map.get(lVertexID)
        if pVertex is None:
            return

        aEdgeID = list(pVertex.aEdgeID)
        for lEdgeID in aEdgeID:
            pEdge = self.edge_map.get(lEdgeID)
            if pEdge is not None:
                self.get_vertex(pEdge.lVertexID_start)
                self.get_vertex(pEdge.lVertexID_end)

        # Edges must go first, their removal looks up this vertex
        for lEdgeID in aEdgeID:
            self.remove_edge(lEdgeID)

        del self.vertex_map[lVertexID]
        logger.debug(f"Removed vertex {lVertexID} and {len(aEdgeID)} incident edge entries")

    def remove_edge(self, lEdgeID: int) -> None:
        """
        Remove an edge and unlink it from both of its vertices.

        Does nothing if the edge is not in the graph.

        Raises:
            VertexNotFoundError: If an endpoint is missing, in which case the
                graph is left unchanged
        """
        pEdge = self.edge_map.get(lEdgeID)
        if pEdge is None:
            return

        # Look up both endpoints before unlinking either one
        pVertex_start = self.get_vertex(pEdge.lVertexID_start)
        pVertex_end = self.get_vertex(pEdge.lVertexID_end)

        for pVertex in (pVertex_start, pVertex_end):
            if lEdgeID in pVertex.aEdgeID:
                pVertex.aEdgeID.remove(lEdgeID)

        del self.edge_map[lEdgeID]
        logger.debug(f"Removed edge {lEdgeID}")

    def clear(self) -> None:
        """Remove everything and reset both ID counters to zero."""
        self.lVertexID_next = 0
        self.lEdgeID_next = 0
        self.vertex_map.clear()
        self.edge_map.clear()
        logger.debug("Cleared sparse graph")

    # ========================================================================
    # SERIALIZATION SUPPORT
    # ========================================================================

    def add_serialized_vertex(self, vertex: pyvertex) -> None:
        """
        Insert or overwrite a vertex under its own lVertexID.

        Neither the ID counter nor any adjacency is updated; the caller must
        supply a vertex whose aEdgeID is already consistent.
        """
        if vertex.lVertexID in self.vertex_map:
            logger.warning(f"Overwriting vertex {vertex.lVertexID} with serialized content")
        self.vertex_map[vertex.lVertexID] = vertex.copy()

    def add_serialized_edge(self, edge: pyedge) -> None:
        """
        Insert or overwrite an edge under its own lEdgeID.

        Neither the ID counter nor the endpoint adjacency is updated; the
        cached endpoint points are kept as supplied.
        """
        if edge.lEdgeID in self.edge_map:
            logger.warning(f"Overwriting edge {edge.lEdgeID} with serialized content")
        self.edge_map[edge.lEdgeID] = edge.copy()

    def restore_id_counters(self) -> None:
        """
        Move both ID counters past the largest live ID.

        Counters are never lowered, so IDs handed out before a restore are
        not reissued.
        """
        if self.vertex_map:
            self.lVertexID_next = max(self.lVertexID_next, max(self.vertex_map) + 1)
        if self.edge_map:
            self.lEdgeID_next = max(self.lEdgeID_next, max(self.edge_map) + 1)
        logger.debug(f"ID counters restored to vertex {self.lVertexID_next}, edge {self.lEdgeID_next}")

    # ========================================================================
    # FRAME TRANSFORM
    # ========================================================================

    def transform_frame(self, transform: Callable[[np.ndarray], np.ndarray]) -> None:
        """
        Apply a coordinate-frame transform to the whole graph.

        Every vertex point and, independently, both cached points of every
        edge are mapped through the same transform.

        Args:
            transform: Callable mapping a 3-D point to a 3-D point, such as
                a pytransformation

        Raises:
            ValueError: If the transform returns something other than a 3-D
                point. Nothing is modified when the transform fails.
        """
        # Compute every new point before assigning any
        aPoint_vertex = [as_point(transform(pVertex.pPoint)) for pVertex in self.vertex_map.values()]
        aPoint_edge = [(as_point(transform(pEdge.pPoint_start)), as_point(transform(pEdge.pPoint_end)))
                       for pEdge in self.edge_map.values()]

        for pVertex, pPoint in zip(self.vertex_map.values(), aPoint_vertex):
            pVertex.pPoint = pPoint
        for pEdge, (pPoint_start, pPoint_end) in zip(self.edge_map.values(), aPoint_edge):
            pEdge.pPoint_start = pPoint_start
            pEdge.pPoint_end = pPoint_end

        logger.debug(f"Transformed {len(self.vertex_map)} vertices and {len(self.edge_map)} edges")
