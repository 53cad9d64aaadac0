"""Talk to a running devgraph server over HTTP.

Usage after building a workflow definition:

    from devgraph.sdk.client import register_graph
    register_graph(schema, name="QA Workflow")
"""

from __future__ import annotations

import os
import warnings

import httpx

from devgraph.models.display import DisplayGraph, GraphMeta
from devgraph.models.graph_schema import GraphDefinition, GraphSchema
from devgraph.utils.identifiers import slugify

DEFAULT_BASE_URL = os.getenv("DEVGRAPH_URL", "http://localhost:8000")


class GraphClient:
    """Thin wrapper over the server's /api/graphs endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> GraphClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def register_graph(self, graph_id: str, name: str, schema: GraphSchema) -> GraphDefinition:
        """PUT a definition; safe to call on every build."""
        response = self._client.put(
            f"/api/graphs/{graph_id}",
            json={"name": name, "graph_schema": schema.model_dump(mode="json")},
        )
        response.raise_for_status()
        return GraphDefinition.model_validate(response.json())

    def list_graphs(self) -> list[GraphMeta]:
        response = self._client.get("/api/graphs")
        response.raise_for_status()
        return [GraphMeta.model_validate(item) for item in response.json()]

    def fetch_flat_graph(self, graph_id: str) -> DisplayGraph:
        """Get the flattened, display-ready view of a graph."""
        response = self._client.get(f"/api/graphs/{graph_id}/flat")
        response.raise_for_status()
        return DisplayGraph.model_validate(response.json())


def register_graph(
    schema: GraphSchema,
    name: str,
    graph_id: str | None = None,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = 10.0,
) -> GraphDefinition | None:
    """Register a graph with the server, warning instead of raising if it is down.

    graph_id defaults to a slug of the name.
    """
    graph_id = graph_id or slugify(name)
    try:
        with GraphClient(base_url, timeout=timeout) as client:
            return client.register_graph(graph_id, name, schema)
    except (httpx.ConnectError, httpx.HTTPStatusError) as exc:
        warnings.warn(
            f"failed to register graph with server at {base_url}: {exc}",
            stacklevel=2,
        )
        return None
