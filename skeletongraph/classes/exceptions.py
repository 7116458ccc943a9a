"""
Exceptions raised by the skeletongraph package.

Lookups of missing vertex or edge ids surface as NotFoundError subclasses,
which are also LookupError so callers can catch them generically.
"""

from typing import List


class SparseGraphError(Exception):
    """Base class for all sparse graph errors."""


class NotFoundError(SparseGraphError, LookupError):
    """
    An id does not identify a live entity.

    Args:
        lID: The id that was looked up
    """

    sKind = "entity"

    def __init__(self, lID: int):
        self.lID = lID
        super().__init__(f"{self.sKind} {lID} not found in graph")


class VertexNotFoundError(NotFoundError):
    sKind = "Vertex"


class EdgeNotFoundError(NotFoundError):
    sKind = "Edge"


class GraphConsistencyError(SparseGraphError):
    """
    Raised when a restored graph violates its adjacency invariants.

    Args:
        aIssue: Human-readable description of every violation found
    """

    def __init__(self, aIssue: List[str]):
        self.aIssue = list(aIssue)
        summary = "; ".join(self.aIssue[:3])
        if len(self.aIssue) > 3:
            summary += f" (+{len(self.aIssue) - 3} more)"
        super().__init__(f"Graph is inconsistent: {summary}")
