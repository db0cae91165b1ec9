"""
levelwise: breadth-first traversal as a lazy sequence of levels.

A traversal is driven by a ChildProvider, an immutable value that, queried
with a node, returns the node's children and a new provider. State such as
visited nodes is threaded from one provider to the next instead of being
mutated, and `bfs` yields (depth, frontier) pairs on demand.

Providers:
- GraphChildProvider for adjacency mappings, expanding each node once
- TreeChildProvider for RoseNode trees, precomputed in breadth order
- UnfoldChildProvider for trees generated by a child function

Example Usage:
    >>> from levelwise import bfs, graph_provider
    >>> graph = {1: [2, 3, 4], 2: [5, 6], 3: [7, 8], 4: [9, 10]}
    >>> list(bfs(graph_provider(graph), 0, [1]))
    [(0, (1,)), (1, (2, 3, 4)), (2, (5, 6, 7, 8, 9, 10))]
"""

from levelwise.display import display_levels, format_level
from levelwise.providers import (
    GraphChildProvider,
    TreeChildProvider,
    UnfoldChildProvider,
    graph_provider,
    tree_provider,
    unfold_provider,
)
from levelwise.traversal import (
    bfs,
    breadth_first_nodes,
    breadth_first_preorder,
    expand_frontier,
    levels,
    take_levels,
    tree_levels,
)
from levelwise.types import ChildProvider, Frontier, Graph, Level, RoseNode, T

__all__ = [
    # Types
    "T",
    "Frontier",
    "Level",
    "Graph",
    "RoseNode",
    "ChildProvider",
    # Providers
    "GraphChildProvider",
    "TreeChildProvider",
    "UnfoldChildProvider",
    "graph_provider",
    "tree_provider",
    "unfold_provider",
    # Traversal
    "bfs",
    "expand_frontier",
    "breadth_first_preorder",
    "tree_levels",
    "levels",
    "breadth_first_nodes",
    "take_levels",
    # Display
    "format_level",
    "display_levels",
]
