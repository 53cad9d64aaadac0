"""Errors raised while loading or flattening graphs."""


class GraphViewError(Exception):
    """Base class for everything the debug view can fail with."""


class MalformedGraphError(GraphViewError):
    """A nested graph lacks a usable Start or End node for rewiring."""

    def __init__(self, composite_key: str, missing: str, reason: str | None = None) -> None:
        self.composite_key = composite_key
        self.missing = missing
        self.reason = reason or f"has no {missing!r} node"
        super().__init__(f"nested graph of node {composite_key!r} {self.reason}")


class GraphNotFoundError(GraphViewError):
    """No definition is registered under the graph id."""

    def __init__(self, graph_id: str) -> None:
        self.graph_id = graph_id
        super().__init__(f"Graph not found: {graph_id}")


class GraphCreationError(GraphViewError):
    """A definition exists but building the graph from it failed."""

    def __init__(self, graph_id: str, reason: str) -> None:
        self.graph_id = graph_id
        self.reason = reason
        super().__init__(f"failed to create graph {graph_id}: {reason}")
