"""Text formatting utilities for logging."""

from typing import Any, Iterable, Mapping, Tuple


def format_node(node: Any) -> str:
    """Format a node identifier for display."""
    return str(node)


def format_edge(edge: Tuple[Any, Any]) -> str:
    """Format a directed edge as 'u -> v'."""
    source, target = edge
    return f"{format_node(source)} -> {format_node(target)}"


def format_neighbors(neighbors: Iterable[Tuple[Any, float]]) -> str:
    """Format an adjacency list as 'n:w, n:w, ...'."""
    parts = [f"{format_node(n)}:{w:g}" for n, w in neighbors]
    if not parts:
        return "∅"
    return ", ".join(parts)


def format_ordering(ordering: Mapping[Any, int]) -> str:
    """Format an ordering as the node sequence it encodes."""
    if not ordering:
        return "[]"
    sequence = sorted(ordering.items(), key=lambda item: item[1])
    return "[" + ", ".join(format_node(node) for node, _ in sequence) + "]"
