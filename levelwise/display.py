"""
Textual rendering of traversal levels.
"""

from collections.abc import Iterable, Sequence

from levelwise.types import Level, T


def format_level(depth: int, frontier: Sequence[T]) -> str:
    values = ", ".join(repr(node) for node in frontier)
    return f"{depth}: [{values}]"


def display_levels(pairs: Iterable[Level[T]], title: str | None = None) -> None:
    """Prints one line per level, pulling pairs as they are displayed."""
    if title is not None:
        print(title)
    for depth, frontier in pairs:
        print(format_level(depth, frontier))


__all__ = ["format_level", "display_levels"]
