"""devgraph - flatten and inspect composable workflow graphs."""

from devgraph.analysis import deduplicate, display_label, flatten_graph, to_display_graph
from devgraph.errors import (
    GraphCreationError,
    GraphNotFoundError,
    GraphViewError,
    MalformedGraphError,
)
from devgraph.models import (
    DisplayGraph,
    FlatGraph,
    GraphEdge,
    GraphNode,
    GraphSchema,
    NodeType,
)
from devgraph.registry import GraphRegistry, InMemoryGraphRegistry

__all__ = [
    # Models
    "DisplayGraph",
    "FlatGraph",
    "GraphEdge",
    "GraphNode",
    "GraphSchema",
    "NodeType",
    # Flattening
    "deduplicate",
    "display_label",
    "flatten_graph",
    "to_display_graph",
    # Registries
    "GraphRegistry",
    "InMemoryGraphRegistry",
    # Errors
    "GraphCreationError",
    "GraphNotFoundError",
    "GraphViewError",
    "MalformedGraphError",
]
