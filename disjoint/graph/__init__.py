"""
.. autosummary::
    :nosignatures:

    generate_maze
    has_cycle
    label_components
    minimum_spanning_edges
    minimum_spanning_tree
"""

from disjoint.graph.graph_functions import (
    _test_graph,
    has_cycle,
    label_components,
    minimum_spanning_edges,
    minimum_spanning_tree
)
from disjoint.graph.graph_generation import (
    generate_maze
)

__all__ = [
    '_test_graph',
    'generate_maze',
    'has_cycle',
    'label_components',
    'minimum_spanning_edges',
    'minimum_spanning_tree'
]
