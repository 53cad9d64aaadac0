"""Models handed to the presentation layer."""

from pydantic import BaseModel, Field

from devgraph.models.graph_schema import GraphEdge, GraphNode


class FlatGraph(BaseModel):
    """a graph with every composite node expanded."""

    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)


class DisplayNode(BaseModel):
    key: str
    label: str
    type: str


class DisplayEdge(BaseModel):
    # "from" is a keyword, so the field is aliased on the wire
    model_config = {"populate_by_name": True}

    from_: str = Field(alias="from")
    to: str


class DisplayGraph(BaseModel):
    """what the vis-network page and the /flat endpoint render."""

    graph_id: str | None = None
    nodes: list[DisplayNode] = Field(default_factory=list)
    edges: list[DisplayEdge] = Field(default_factory=list)


class GraphMeta(BaseModel):
    """one row of the graph list page."""

    id: str
    name: str
    href: str
