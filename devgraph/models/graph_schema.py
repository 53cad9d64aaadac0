"""Data model for composable workflow graphs.

A node may wrap a whole nested graph (a composite node). The debug view
flattens those before rendering, so these models are read-only input to
the flattener.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class NodeType(str, Enum):
    """Kinds of nodes a workflow graph can hold."""

    start = "start"
    end = "end"
    parallel = "parallel"
    branch = "branch"
    lambda_ = "Lambda"
    passthrough = "Passthrough"
    graph = "Graph"
    chain = "Chain"
    workflow = "Workflow"
    chat_model = "ChatModel"
    chat_template = "ChatTemplate"
    retriever = "Retriever"
    tools_node = "ToolsNode"


class ComponentSchema(BaseModel):
    """the component a node wraps."""

    name: str = ""
    component: str = ""


class GraphNode(BaseModel):
    """a node in the graph; composite when graph_schema is set."""

    key: str
    type: NodeType
    name: str = ""
    component_schema: ComponentSchema | None = None
    graph_schema: GraphSchema | None = None

    @property
    def is_composite(self) -> bool:
        return self.graph_schema is not None


class GraphEdge(BaseModel):
    """a directed edge between two node keys of the same graph scope."""

    source_node_key: str
    target_node_key: str
    name: str = ""

    @property
    def identity(self) -> tuple[str, str]:
        """edges are equal when they join the same ordered pair of keys."""
        return (self.source_node_key, self.target_node_key)


class GraphSchema(BaseModel):
    """a (possibly nested) workflow graph."""

    name: str = ""
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)


class GraphDefinition(BaseModel):
    """a graph as stored by a registry."""

    graph_id: str
    name: str
    graph_schema: GraphSchema
    created_at: str
    updated_at: str


GraphNode.model_rebuild()
