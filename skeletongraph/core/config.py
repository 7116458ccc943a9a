"""
Configuration for the sparse graph and its restore path.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how a SparseGraph behaves when content is restored from a
    serialized form.

    Attributes:
        advance_counters_on_load: Move the id counters past every restored id
            after a batch load, so later allocations cannot collide
        check_consistency_on_load: Audit adjacency invariants after a batch
            load and raise GraphConsistencyError on violation
        point_tolerance: Default tolerance when comparing cached edge points
            against vertex points
    """

    advance_counters_on_load: bool = True
    check_consistency_on_load: bool = False
    point_tolerance: float = 1e-9
