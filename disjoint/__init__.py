"""
.. autosummary::
    :nosignatures:

    Element
    singleton
    find
    union
    same_set
    UnionFind
"""
from importlib.metadata import version

from disjoint.forest import (
    Element,
    find,
    same_set,
    singleton,
    union
)
from disjoint.union_find import UnionFind

from disjoint.graph import *
import disjoint.graph as graph

__version__ = version(__package__ or __name__)

__all__ = [
    '__version__',
    'Element',
    'find',
    'same_set',
    'singleton',
    'union',
    'UnionFind'
]
__all__.extend(graph.__all__)
