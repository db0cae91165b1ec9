"""
Level-by-level traversal driven by child providers.

Generator:
    bfs(provider, depth, frontier) - Lazily yields (depth, frontier) pairs

Steps:
    expand_frontier(provider, frontier) - Folds a provider over one frontier

Helpers:
    breadth_first_preorder(after, root) - Nodes of a tree, level by level
    tree_levels(tree)                    - Node values per depth of a RoseNode
    levels(provider, seed)               - All (depth, frontier) pairs as a list
    breadth_first_nodes(provider, seed)  - Flattened nodes in visiting order
    take_levels(pairs, max_depth)        - Truncates a pair stream by depth
"""

import logging
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from functools import reduce
from itertools import chain

from levelwise.types import ChildProvider, Frontier, Level, RoseNode, T

logger = logging.getLogger(__name__)


def expand_frontier(
    provider: ChildProvider[T], frontier: Iterable[T]
) -> tuple[ChildProvider[T], Frontier[T]]:
    """
    Queries `provider` once per node, left to right, threading its state.

    Returns:
        The last provider and the concatenated children, ordered by parent
        then by the order the provider returned them.
    """

    chunks: list[Frontier[T]] = []

    def step(current: ChildProvider[T], node: T) -> ChildProvider[T]:
        ys, successor = current.query(node)
        chunks.append(ys)
        return successor

    final = reduce(step, frontier, provider)
    return final, tuple(chain.from_iterable(chunks))


def bfs(
    provider: ChildProvider[T], depth: int = 0, frontier: Iterable[T] = ()
) -> Iterator[Level[T]]:
    """
    Performs a breadth-first traversal, yielding one level at a time.

    The next frontier is only computed when the consumer asks for it, so
    stopping the iteration is enough to cancel the traversal. Termination
    relies on the provider eventually returning no children.

    Args:
        provider: Provider used to expand the first frontier.
        depth: Depth of the first frontier.
        frontier: Nodes at `depth`.

    Yields:
        Level[T]: (depth, frontier) with depths increasing by one.

    Raises:
        ValueError: If `depth` is negative.
    """
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")
    current = tuple(frontier)
    while True:
        yield depth, current
        provider, current = expand_frontier(provider, current)
        if not current:
            logger.debug(f"Traversal exhausted after depth {depth}")
            return
        depth += 1
        logger.debug(f"Depth {depth}: {len(current)} nodes")


def breadth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """Yields nodes level by level, root first."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        current = queue.popleft()
        yield current
        queue.extend(after(current))


def tree_levels(tree: RoseNode[T]) -> list[Frontier[T]]:
    """
    Returns the node values of `tree` grouped by depth, root level first.

    Computed structurally, without any provider.
    """
    result: list[Frontier[T]] = []
    layer: tuple[RoseNode[T], ...] = (tree,)
    while layer:
        result.append(tuple(node.value for node in layer))
        layer = tuple(child for node in layer for child in node.children)
    return result


def levels(provider: ChildProvider[T], seed: Iterable[T]) -> list[Level[T]]:
    """Collects every (depth, frontier) pair starting from `seed` at depth 0."""
    return list(bfs(provider, 0, seed))


def breadth_first_nodes(provider: ChildProvider[T], seed: Iterable[T]) -> Iterator[T]:
    """Yields the nodes of each level in order, one level at a time."""
    return chain.from_iterable(frontier for _, frontier in bfs(provider, 0, seed))


def take_levels(pairs: Iterable[Level[T]], max_depth: int) -> Iterator[Level[T]]:
    """
    Stops a stream of levels after `max_depth`.

    Meant for providers over infinite trees: the stream is not pulled again
    once `max_depth` is reached, so deeper levels are never computed.

    Raises:
        ValueError: If `max_depth` is negative.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")
    for depth, frontier in pairs:
        if depth > max_depth:
            return
        yield depth, frontier
        if depth == max_depth:
            return


__all__ = [
    "expand_frontier",
    "bfs",
    "breadth_first_preorder",
    "tree_levels",
    "levels",
    "breadth_first_nodes",
    "take_levels",
]
