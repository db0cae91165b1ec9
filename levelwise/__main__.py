"""
Prints the levels of a few sample traversals.

Usage:
    python -m levelwise
"""

import logging

from levelwise.constants import LOG_FORMAT, LOG_LEVEL
from levelwise.display import display_levels
from levelwise.providers import graph_provider, tree_provider
from levelwise.traversal import bfs
from levelwise.types import RoseNode

logger = logging.getLogger(__name__)


def main() -> None:
    graph = {1: [2, 3, 4], 2: [5, 6], 3: [7, 8], 4: [9, 10]}
    display_levels(bfs(graph_provider(graph), 0, [1]), title="Graph")

    tree = RoseNode(
        1,
        (
            RoseNode(2, (RoseNode(5), RoseNode(6))),
            RoseNode(3, (RoseNode(7), RoseNode(8))),
            RoseNode(4, (RoseNode(9), RoseNode(10))),
        ),
    )
    display_levels(bfs(tree_provider(tree), 0, [tree.value]), title="Tree")

    cycle = {1: [2], 2: [1]}
    display_levels(bfs(graph_provider(cycle), 0, [1]), title="Cycle")


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    logger.info("Running sample traversals")
    main()
