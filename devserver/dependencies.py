"""FastAPI dependencies shared by the route modules."""

from fastapi import Request

from devgraph.registry import GraphRegistry


def get_registry(request: Request) -> GraphRegistry:
    """the registry the app was created with."""
    return request.app.state.registry
