"""
Vertex representation of a skeleton graph.
"""

from typing import Iterable, List, Optional
import numpy as np


def as_point(point) -> np.ndarray:
    """
    Convert a 3-element sequence into a float64 point array.

    Args:
        point: Any sequence or array holding exactly three coordinates

    Returns:
        A new numpy array of shape (3,)

    Raises:
        ValueError: If the input does not hold exactly three values
    """
    aPoint = np.array(point, dtype=np.float64).reshape(-1)
    if aPoint.shape != (3,):
        raise ValueError(f"Expected a 3-D point, got shape {np.shape(point)}")
    return aPoint


class pyvertex:
    """
    A labelled 3-D point of the skeleton.

    The vertex never references edges directly, only through the edge ids
    listed in aEdgeID, which the owning graph resolves.
    """

    def __init__(self, point=(0.0, 0.0, 0.0), lVertexID: int = -1,
                 aEdgeID: Optional[Iterable[int]] = None, dDistance: float = 0.0):
        """
        Initialize a vertex.

        Args:
            point: Vertex coordinates (3 values)
            lVertexID: Vertex ID, -1 until assigned by a graph
            aEdgeID: Ordered ids of incident edges
            dDistance: Clearance to the nearest obstacle
        """
        self.lVertexID = lVertexID
        self.pPoint = as_point(point)
        self.aEdgeID: List[int] = list(aEdgeID) if aEdgeID is not None else []
        self.dDistance = float(dDistance)

    def get_degree(self) -> int:
        """Number of incident edge entries (a self-loop counts twice)."""
        return len(self.aEdgeID)

    def copy(self) -> "pyvertex":
        return pyvertex(self.pPoint.copy(), self.lVertexID, self.aEdgeID, self.dDistance)

    def __repr__(self) -> str:
        return (f"pyvertex(lVertexID={self.lVertexID}, pPoint={self.pPoint.tolist()}, "
                f"aEdgeID={self.aEdgeID})")
