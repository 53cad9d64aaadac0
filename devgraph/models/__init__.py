"""Core data models for devgraph."""

from devgraph.models.display import (
    DisplayEdge,
    DisplayGraph,
    DisplayNode,
    FlatGraph,
    GraphMeta,
)
from devgraph.models.graph_schema import (
    ComponentSchema,
    GraphDefinition,
    GraphEdge,
    GraphNode,
    GraphSchema,
    NodeType,
)

__all__ = [
    # Graph definitions
    "ComponentSchema",
    "GraphDefinition",
    "GraphEdge",
    "GraphNode",
    "GraphSchema",
    "NodeType",
    # Presentation
    "DisplayEdge",
    "DisplayGraph",
    "DisplayNode",
    "FlatGraph",
    "GraphMeta",
]
