"""
Operations that move whole graphs in and out of the container.
"""

from .serialization import GraphSerializer

__all__ = ['GraphSerializer']
