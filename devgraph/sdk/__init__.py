"""SDK for registering graphs with a devgraph server."""

from devgraph.sdk.client import GraphClient, register_graph

__all__ = [
    "GraphClient",
    "register_graph",
]
