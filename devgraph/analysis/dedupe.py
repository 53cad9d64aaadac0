"""Collapse node and edge lists into sets keyed by identity."""

from collections.abc import Iterable

from devgraph.models.graph_schema import GraphEdge, GraphNode


def deduplicate(
    nodes: Iterable[GraphNode],
    edges: Iterable[GraphEdge],
) -> tuple[list[GraphNode], list[GraphEdge]]:
    """Drop repeated nodes (by key) and edges (by source/target pair).

    The last occurrence of an identity wins. Output keeps the position at
    which each identity was first seen, so results are stable across runs.
    """
    node_map: dict[str, GraphNode] = {}
    for node in nodes:
        node_map[node.key] = node

    edge_map: dict[tuple[str, str], GraphEdge] = {}
    for edge in edges:
        edge_map[edge.identity] = edge

    return list(node_map.values()), list(edge_map.values())
