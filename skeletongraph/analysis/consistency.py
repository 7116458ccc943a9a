"""
Invariant auditing for sparse graphs.

This module inspects a graph for broken adjacency bookkeeping, which can
only arise from restored content or from direct edits of the stores.
"""

import logging
from typing import List, Optional

import numpy as np

from ..core.graph import SparseGraph

logger = logging.getLogger(__name__)


class ConsistencyChecker:
    """
    Checks a SparseGraph against its structural invariants.

    This class provides methods for:
    - Verifying that adjacency lists and edge endpoints agree
    - Verifying that stored entities carry the id they are keyed by
    - Comparing cached edge points against the current vertex points

    The graph is never modified.
    """

    def __init__(self, graph: SparseGraph):
        """
        Initialize the checker.

        Args:
            graph: SparseGraph instance to audit
        """
        self.graph = graph

    def check(self) -> List[str]:
        """
        Collect every structural invariant violation.

        Returns:
            List of issue descriptions, empty when the graph is consistent
        """
        aIssue = []

        for lVertexID, pVertex in self.graph.vertex_map.items():
            if pVertex.lVertexID != lVertexID:
                aIssue.append(f"Vertex stored under {lVertexID} carries id {pVertex.lVertexID}")
            for lEdgeID in pVertex.aEdgeID:
                pEdge = self.graph.edge_map.get(lEdgeID)
                if pEdge is None:
                    aIssue.append(f"Vertex {lVertexID} lists unknown edge {lEdgeID}")
                elif not pEdge.is_incident_to(lVertexID):
                    aIssue.append(f"Vertex {lVertexID} lists edge {lEdgeID} which does not touch it")

        for lEdgeID, pEdge in self.graph.edge_map.items():
            if pEdge.lEdgeID != lEdgeID:
                aIssue.append(f"Edge stored under {lEdgeID} carries id {pEdge.lEdgeID}")
            for lVertexID in (pEdge.lVertexID_start, pEdge.lVertexID_end):
                pVertex = self.graph.vertex_map.get(lVertexID)
                if pVertex is None:
                    aIssue.append(f"Edge {lEdgeID} references missing vertex {lVertexID}")
                elif lEdgeID not in pVertex.aEdgeID:
                    aIssue.append(f"Edge {lEdgeID} is not listed by vertex {lVertexID}")

        if aIssue:
            logger.debug(f"Found {len(aIssue)} consistency issues")
        return aIssue

    def check_cached_points(self, dTolerance: Optional[float] = None) -> List[int]:
        """
        Find edges whose cached endpoint points no longer match their vertices.

        A mismatch is expected after a vertex point is edited directly; it
        is reported here, not repaired.

        Args:
            dTolerance: Absolute tolerance per coordinate, defaults to the
                graph's configured point tolerance

        Returns:
            Ascending list of edge IDs with stale cached points
        """
        if dTolerance is None:
            dTolerance = self.graph.config.point_tolerance

        aEdgeID_stale = []
        for lEdgeID in self.graph.get_all_edge_ids():
            pEdge = self.graph.edge_map[lEdgeID]
            pVertex_start = self.graph.vertex_map.get(pEdge.lVertexID_start)
            pVertex_end = self.graph.vertex_map.get(pEdge.lVertexID_end)
            if pVertex_start is None or pVertex_end is None:
                continue
            if not (np.allclose(pEdge.pPoint_start, pVertex_start.pPoint, rtol=0.0, atol=dTolerance)
                    and np.allclose(pEdge.pPoint_end, pVertex_end.pPoint, rtol=0.0, atol=dTolerance)):
                aEdgeID_stale.append(lEdgeID)

        return aEdgeID_stale

    def is_consistent(self) -> bool:
        return not self.check()
