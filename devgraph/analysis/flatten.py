"""Flatten nested workflow graphs for the debug view.

A composite node stands in for a whole sub-graph. Flattening replaces it
with the sub-graph's nodes and points every edge that touched the
composite at the sub-graph's Start (incoming) or End (outgoing) node.
Nesting is unwound bottom-up by plain recursion.
"""

from __future__ import annotations

import logging

from devgraph.analysis.dedupe import deduplicate
from devgraph.errors import MalformedGraphError
from devgraph.models.display import FlatGraph
from devgraph.models.graph_schema import GraphEdge, GraphNode, GraphSchema, NodeType

logger = logging.getLogger(__name__)

# composite key -> (start node, end node) of its nested graph
Terminals = dict[str, tuple[GraphNode, GraphNode]]


def flatten_graph(graph: GraphSchema | None) -> FlatGraph:
    """Return the leaf nodes and rewired edges of a graph, deduplicated.

    A ``None`` graph flattens to an empty result.

    Raises:
        MalformedGraphError: a nested graph has no Start or no End node,
            or one of them is itself composite.
    """
    if graph is None:
        return FlatGraph()
    nodes, edges = _flatten(graph)
    return FlatGraph(nodes=nodes, edges=edges)


def find_terminals(node: GraphNode) -> tuple[GraphNode, GraphNode]:
    """Locate the Start and End nodes of a composite node's nested graph.

    The first node of each type wins when there are several. Both must be
    leaves, since edges rewired onto them have to survive flattening.
    """
    start: GraphNode | None = None
    end: GraphNode | None = None
    for candidate in node.graph_schema.nodes:
        if candidate.type == NodeType.start:
            if start is None:
                start = candidate
            else:
                logger.warning(
                    "nested graph of %s has several start nodes, using %s",
                    node.key, start.key,
                )
        elif candidate.type == NodeType.end:
            if end is None:
                end = candidate
            else:
                logger.warning(
                    "nested graph of %s has several end nodes, using %s",
                    node.key, end.key,
                )

    if start is None:
        raise MalformedGraphError(node.key, NodeType.start.value)
    if end is None:
        raise MalformedGraphError(node.key, NodeType.end.value)

    # rewired edges must land on a leaf
    for terminal in (start, end):
        if terminal.is_composite:
            raise MalformedGraphError(
                node.key,
                terminal.type.value,
                reason=f"has composite {terminal.type.value!r} node {terminal.key!r}",
            )
    return start, end


def _flatten(graph: GraphSchema) -> tuple[list[GraphNode], list[GraphEdge]]:
    terminals: Terminals = {
        node.key: find_terminals(node) for node in graph.nodes if node.is_composite
    }

    all_nodes: list[GraphNode] = []
    all_edges: list[GraphEdge] = []
    for node in graph.nodes:
        if node.is_composite:
            sub_nodes, sub_edges = _expand_composite(node, graph.edges, terminals)
            all_nodes.extend(sub_nodes)
            all_edges.extend(sub_edges)
        else:
            all_nodes.append(node)

    # edges touching a composite were rewired above
    all_edges.extend(
        edge
        for edge in graph.edges
        if edge.source_node_key not in terminals
        and edge.target_node_key not in terminals
    )

    return deduplicate(all_nodes, all_edges)


def _expand_composite(
    node: GraphNode,
    parent_edges: list[GraphEdge],
    terminals: Terminals,
) -> tuple[list[GraphNode], list[GraphEdge]]:
    """Replace one composite node by its flattened nested graph."""
    start, end = terminals[node.key]
    sub_nodes, sub_edges = _flatten(node.graph_schema)
    logger.debug(
        "expanded %s into %d nodes and %d edges (start=%s, end=%s)",
        node.key, len(sub_nodes), len(sub_edges), start.key, end.key,
    )

    rewired: list[GraphEdge] = []
    for edge in parent_edges:
        if edge.target_node_key == node.key:
            rewired.append(GraphEdge(
                source_node_key=_exit_key(edge.source_node_key, terminals),
                target_node_key=start.key,
            ))
        if edge.source_node_key == node.key:
            rewired.append(GraphEdge(
                source_node_key=end.key,
                target_node_key=_entry_key(edge.target_node_key, terminals),
            ))

    return sub_nodes + [start, end], sub_edges + rewired


def _entry_key(key: str, terminals: Terminals) -> str:
    """Key an edge into ``key`` should land on once composites are gone."""
    if key in terminals:
        return terminals[key][0].key
    return key


def _exit_key(key: str, terminals: Terminals) -> str:
    """Key an edge out of ``key`` should leave from once composites are gone."""
    if key in terminals:
        return terminals[key][1].key
    return key
