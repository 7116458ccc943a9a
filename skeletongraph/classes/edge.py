"""
Edge representation of a skeleton graph.
"""

import numpy as np

from .vertex import as_point


class pyedge:
    """
    A straight segment between two vertices of the skeleton.

    pPoint_start and pPoint_end are coordinate snapshots of the endpoint
    vertices, taken when the edge is added to a graph. They are only
    refreshed by a frame transform, never by later vertex edits.
    """

    def __init__(self, lVertexID_start: int = -1, lVertexID_end: int = -1,
                 lEdgeID: int = -1,
                 point_start=(0.0, 0.0, 0.0), point_end=(0.0, 0.0, 0.0),
                 dDistance_start: float = 0.0, dDistance_end: float = 0.0):
        """
        Initialize an edge.

        Args:
            lVertexID_start: ID of the start vertex
            lVertexID_end: ID of the end vertex
            lEdgeID: Edge ID, -1 until assigned by a graph
            point_start: Cached start point
            point_end: Cached end point
            dDistance_start: Clearance at the start vertex
            dDistance_end: Clearance at the end vertex
        """
        self.lEdgeID = lEdgeID
        self.lVertexID_start = lVertexID_start
        self.lVertexID_end = lVertexID_end
        self.pPoint_start = as_point(point_start)
        self.pPoint_end = as_point(point_end)
        self.dDistance_start = float(dDistance_start)
        self.dDistance_end = float(dDistance_end)

    def is_incident_to(self, lVertexID: int) -> bool:
        return lVertexID == self.lVertexID_start or lVertexID == self.lVertexID_end

    def get_other_vertex(self, lVertexID: int) -> int:
        """
        Get the endpoint opposite to the given one.

        Args:
            lVertexID: One of the two endpoint ids

        Returns:
            The other endpoint id (the same id for a self-loop)

        Raises:
            ValueError: If lVertexID is not an endpoint of this edge
        """
        if lVertexID == self.lVertexID_start:
            return self.lVertexID_end
        if lVertexID == self.lVertexID_end:
            return self.lVertexID_start
        raise ValueError(f"Vertex {lVertexID} is not an endpoint of edge {self.lEdgeID}")

    def get_length(self) -> float:
        """Euclidean length of the cached segment."""
        return float(np.linalg.norm(self.pPoint_end - self.pPoint_start))

    def copy(self) -> "pyedge":
        return pyedge(self.lVertexID_start, self.lVertexID_end, self.lEdgeID,
                      self.pPoint_start.copy(), self.pPoint_end.copy(),
                      self.dDistance_start, self.dDistance_end)

    def __repr__(self) -> str:
        return (f"pyedge(lEdgeID={self.lEdgeID}, "
                f"{self.lVertexID_start} -> {self.lVertexID_end})")
