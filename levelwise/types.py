"""
Core types for functional breadth-first traversal.

Types:
    Frontier       - Ordered nodes sharing the same depth
    Level          - A (depth, frontier) pair as emitted by `bfs`
    Graph          - Read-only adjacency mapping (node -> ordered children)
    RoseNode       - Immutable tree: a value and an ordered tuple of subtrees
    ChildProvider  - Capability returning a node's children and its successor
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from typing_extensions import TypeAliasType

T = TypeVar("T")

Frontier = TypeAliasType("Frontier", tuple[T, ...], type_params=(T,))
Level = TypeAliasType("Level", tuple[int, Frontier[T]], type_params=(T,))
Graph = TypeAliasType("Graph", Mapping[T, Sequence[T]], type_params=(T,))


@dataclass(frozen=True)
class RoseNode(Generic[T]):
    """Generic tree node. Each node has a value and children."""

    value: T
    children: "tuple[RoseNode[T], ...]" = field(default_factory=tuple)


@dataclass(frozen=True)
class ChildProvider(ABC, Generic[T]):
    """
    Capability expanding one node at a time without mutation.

    A query never alters the provider it is made on. It returns the ordered
    children of the node together with a new provider carrying whatever
    state the query produced (visited nodes, consumed positions...).
    Querying an unknown node is not an error and yields no children.
    """

    @abstractmethod
    def query(self, node: T) -> "tuple[Frontier[T], ChildProvider[T]]":
        """Returns the children of `node` and the successor provider."""
        ...


__all__ = [
    "T",
    "Frontier",
    "Level",
    "Graph",
    "RoseNode",
    "ChildProvider",
]
