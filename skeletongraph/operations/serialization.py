"""
Save and load entry points for sparse graphs.

This module turns a graph into plain entity lists and back. Encoding those
lists to a file or message is left to the caller.
"""

import logging
from typing import Iterable, List, Tuple

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from ..classes.exceptions import GraphConsistencyError
from ..core.graph import SparseGraph
from ..analysis.consistency import ConsistencyChecker

logger = logging.getLogger(__name__)


class GraphSerializer:
    """
    Moves whole graphs in and out of entity lists.

    Saving reads every entity by id; loading restores every entity under
    its own id, so adjacency lists and cached points come back exactly as
    they were saved.
    """

    def save(self, graph: SparseGraph) -> Tuple[List[pyvertex], List[pyedge]]:
        """
        Snapshot every vertex and edge of a graph.

        Args:
            graph: Graph to save

        Returns:
            Tuple of (vertices, edges), copies in ascending id order
        """
        aVertex = [graph.get_vertex(lVertexID).copy() for lVertexID in graph.get_all_vertex_ids()]
        aEdge = [graph.get_edge(lEdgeID).copy() for lEdgeID in graph.get_all_edge_ids()]
        logger.debug(f"Saved {len(aVertex)} vertices and {len(aEdge)} edges")
        return aVertex, aEdge

    def load(self, graph: SparseGraph, aVertex: Iterable[pyvertex], aEdge: Iterable[pyedge],
             iFlag_clear: bool = True) -> SparseGraph:
        """
        Restore saved entities into a graph.

        Entities may arrive in any order. Depending on the graph's config the
        id counters are then moved past the restored ids, and the result is
        audited. The load is staged in a scratch graph and only committed
        once the audit passes, so a rejected load leaves the graph untouched.

        Args:
            graph: Graph to load into
            aVertex: Saved vertices, each carrying its own lVertexID
            aEdge: Saved edges, each carrying its own lEdgeID
            iFlag_clear: Clear the graph before loading

        Returns:
            The same graph, for chaining

        Raises:
            GraphConsistencyError: If auditing is enabled and the restored
                graph violates its adjacency invariants
        """
        staging = SparseGraph(graph.config)
        if not iFlag_clear:
            # Stored entities are only replaced, never mutated, by a load
            staging.vertex_map = dict(graph.vertex_map)
            staging.edge_map = dict(graph.edge_map)
            staging.lVertexID_next = graph.lVertexID_next
            staging.lEdgeID_next = graph.lEdgeID_next

        nVertex = 0
        for pVertex in aVertex:
            staging.add_serialized_vertex(pVertex)
            nVertex += 1

        nEdge = 0
        for pEdge in aEdge:
            staging.add_serialized_edge(pEdge)
            nEdge += 1

        if staging.config.advance_counters_on_load:
            staging.restore_id_counters()
        else:
            logger.warning("ID counters not restored after load, new ids may collide with loaded ones")

        if staging.config.check_consistency_on_load:
            aIssue = ConsistencyChecker(staging).check()
            if aIssue:
                raise GraphConsistencyError(aIssue)

        graph.vertex_map = staging.vertex_map
        graph.edge_map = staging.edge_map
        graph.lVertexID_next = staging.lVertexID_next
        graph.lEdgeID_next = staging.lEdgeID_next

        logger.debug(f"Loaded {nVertex} vertices and {nEdge} edges")
        return graph
