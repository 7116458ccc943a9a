"""
Read-only analysis of graph structure.
"""

from .consistency import ConsistencyChecker

__all__ = ['ConsistencyChecker']
