"""
Core graph data structure and its configuration.
"""

from .config import GraphConfig
from .graph import SparseGraph

__all__ = ['GraphConfig', 'SparseGraph']
