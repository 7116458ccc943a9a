"""
Core data classes for skeleton graph representation.

This module contains the fundamental data structures used throughout
the skeletongraph library.
"""

from .vertex import pyvertex
from .edge import pyedge
from .transformation import pytransformation

__all__ = [
    'pyvertex',
    'pyedge',
    'pytransformation',
]
