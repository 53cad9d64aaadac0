"""Convert a flattened graph into what the debug page draws."""

from devgraph.models.display import DisplayEdge, DisplayGraph, DisplayNode, FlatGraph
from devgraph.models.graph_schema import GraphNode


def display_label(node: GraphNode) -> str:
    """Node name, else its component's name, else its nested graph's name, else its key.

    Flattened nodes are always leaves, so the nested graph fallback only
    applies to callers labelling nodes of an unflattened schema.
    """
    if node.name:
        return node.name
    if node.component_schema is not None and node.component_schema.name:
        return node.component_schema.name
    if node.graph_schema is not None and node.graph_schema.name:
        return node.graph_schema.name
    return node.key


def to_display_graph(flat: FlatGraph, graph_id: str | None = None) -> DisplayGraph:
    return DisplayGraph(
        graph_id=graph_id,
        nodes=[
            DisplayNode(key=node.key, label=display_label(node), type=node.type.value)
            for node in flat.nodes
        ],
        edges=[
            DisplayEdge(from_=edge.source_node_key, to=edge.target_node_key)
            for edge in flat.edges
        ],
    )
