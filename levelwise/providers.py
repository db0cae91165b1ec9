"""
Concrete child providers.

Providers:
    GraphChildProvider  - Adjacency mapping plus an immutable visited set
    TreeChildProvider   - Children entries of a tree, precomputed in breadth order
    UnfoldChildProvider - Child function for lazily generated trees

Factories:
    graph_provider(graph, visited)  - Provider with nothing (or `visited`) expanded
    tree_provider(tree)             - Provider positioned before the root entry
    unfold_provider(after)          - Stateless provider over `after`
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace

from typing_extensions import override

from levelwise.traversal import breadth_first_preorder
from levelwise.types import ChildProvider, Frontier, Graph, RoseNode, T

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphChildProvider(ChildProvider[T]):
    """
    Expands each node of a graph at most once.

    `visited` holds the expanded nodes, `discovered` every node already
    handed out as a child or expanded. Children are returned only the first
    time they are discovered, so a node never appears twice in the
    traversal once it has been reached. The adjacency mapping is shared
    between all successors; both sets are replaced and only ever grow.
    """

    graph: Graph[T] = field(repr=False)
    visited: frozenset[T] = frozenset()
    discovered: frozenset[T] = frozenset()

    @override
    def query(self, node: T) -> "tuple[Frontier[T], GraphChildProvider[T]]":
        if node in self.visited:
            return (), self
        discovered = set(self.discovered | {node})
        children = []
        for child in self.graph.get(node, ()):
            if child not in discovered:
                discovered.add(child)
                children.append(child)
        return tuple(children), replace(
            self,
            visited=self.visited | {node},
            discovered=frozenset(discovered),
        )


@dataclass(frozen=True)
class TreeChildProvider(ChildProvider[T]):
    """
    Replays the children of a tree's nodes in breadth-first order.

    `entries[i]` holds the node value and the child values of the i-th node
    of the breadth-first order, leaves included. The provider is positional:
    the n-th query returns the n-th entry whatever node it is given, which is
    correct as long as nodes are queried one by one in breadth-first order.
    """

    entries: "tuple[tuple[T, Frontier[T]], ...]" = field(repr=False)
    position: int = 0

    @property
    def remaining(self) -> int:
        return len(self.entries) - self.position

    @override
    def query(self, node: T) -> "tuple[Frontier[T], TreeChildProvider[T]]":
        if self.position >= len(self.entries):
            return (), self
        expected, children = self.entries[self.position]
        if node != expected:
            logger.debug(
                f"Out of order query at position {self.position}: "
                f"got {node!r}, expected {expected!r}"
            )
        return children, replace(self, position=self.position + 1)


@dataclass(frozen=True)
class UnfoldChildProvider(ChildProvider[T]):
    """Expands nodes on demand through `after`. Holds no state."""

    after: Callable[[T], Iterable[T]]

    @override
    def query(self, node: T) -> "tuple[Frontier[T], UnfoldChildProvider[T]]":
        return tuple(self.after(node)), self


def graph_provider(
    graph: Graph[T], visited: Iterable[T] = ()
) -> GraphChildProvider[T]:
    """
    Creates a provider over an adjacency mapping.

    Args:
        graph: Mapping from a node to its ordered children. Nodes missing
            from the mapping have no children.
        visited: Nodes considered already expanded. They are never expanded
            nor returned as children.

    Raises:
        TypeError: If `graph` is not a mapping.
    """
    if not isinstance(graph, Mapping):
        raise TypeError(f"Expected a mapping of node to children, got {type(graph)}")
    visited = frozenset(visited)
    return GraphChildProvider(graph, visited, visited)


def tree_provider(tree: RoseNode[T]) -> TreeChildProvider[T]:
    """
    Creates a provider replaying the children of every node of `tree`.

    The entries are computed once, walking the tree breadth-first so that
    all nodes at depth d are listed before any node at depth d + 1.

    Raises:
        TypeError: If `tree` is not a RoseNode.
    """
    if not isinstance(tree, RoseNode):
        raise TypeError(f"Expected a RoseNode, got {type(tree)}")
    entries = tuple(
        (node.value, tuple(child.value for child in node.children))
        for node in breadth_first_preorder(lambda node: node.children, tree)
    )
    logger.debug(f"Precomputed {len(entries)} tree entries")
    return TreeChildProvider(entries)


def unfold_provider(after: Callable[[T], Iterable[T]]) -> UnfoldChildProvider[T]:
    """
    Creates a provider for trees generated on the fly, possibly infinite.

    Raises:
        TypeError: If `after` is not callable.
    """
    if not callable(after):
        raise TypeError(f"Expected a callable returning children, got {type(after)}")
    return UnfoldChildProvider(after)


__all__ = [
    "GraphChildProvider",
    "TreeChildProvider",
    "UnfoldChildProvider",
    "graph_provider",
    "tree_provider",
    "unfold_provider",
]
