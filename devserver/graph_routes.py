"""API routes for graph definitions and their flattened view."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from devgraph.analysis.display import to_display_graph
from devgraph.analysis.flatten import flatten_graph
from devgraph.models.display import DisplayGraph, GraphMeta
from devgraph.models.graph_schema import GraphDefinition, GraphSchema
from devgraph.registry import GraphRegistry
from devserver.dependencies import get_registry
from devserver.templates import DEBUG_PREFIX

logger = logging.getLogger(__name__)

router = APIRouter()


class UpsertGraphRequest(BaseModel):
    """request body for creating or updating a graph definition."""

    name: str
    graph_schema: GraphSchema


def list_graph_meta(registry: GraphRegistry) -> list[GraphMeta]:
    """every known graph with a link to its debug page, sorted by name."""
    return [
        GraphMeta(id=graph_id, name=name, href=f"{DEBUG_PREFIX}/graphs/{graph_id}")
        for name, graph_id in sorted(registry.list_graphs().items())
    ]


def build_display_graph(registry: GraphRegistry, graph_id: str) -> DisplayGraph:
    """load (or create) the canvas for graph_id and flatten it for display."""
    graph = registry.load_graph(graph_id)
    flat = flatten_graph(graph)
    logger.debug(
        "flattened %s into %d nodes and %d edges",
        graph_id, len(flat.nodes), len(flat.edges),
    )
    return to_display_graph(flat, graph_id=graph_id)


@router.get("/graphs")
def list_graphs(registry: GraphRegistry = Depends(get_registry)) -> list[GraphMeta]:
    """list all known graphs."""
    return list_graph_meta(registry)


@router.get("/graphs/{graph_id}")
def get_graph(graph_id: str, registry: GraphRegistry = Depends(get_registry)) -> GraphDefinition:
    """get a stored graph definition."""
    definition = registry.get_definition(graph_id)
    if not definition:
        raise HTTPException(status_code=404, detail=f"Graph not found: {graph_id}")
    return definition


@router.put("/graphs/{graph_id}")
def upsert_graph(
    graph_id: str,
    request: UpsertGraphRequest,
    registry: GraphRegistry = Depends(get_registry),
) -> GraphDefinition:
    """create or update a graph definition.

    Uses PUT for idempotent upsert, so clients can call it on every build.
    The cached canvas is dropped and the next view rebuilds it.
    """
    definition = registry.save_definition(graph_id, request.name, request.graph_schema)
    logger.info("stored graph %s (%s)", graph_id, request.name)
    return definition


@router.delete("/graphs/{graph_id}")
def delete_graph(graph_id: str, registry: GraphRegistry = Depends(get_registry)) -> dict:
    """delete a graph definition."""
    if not registry.delete_definition(graph_id):
        raise HTTPException(status_code=404, detail=f"Graph not found: {graph_id}")
    return {"deleted": graph_id}


@router.get("/graphs/{graph_id}/flat")
def get_flat_graph(graph_id: str, registry: GraphRegistry = Depends(get_registry)) -> DisplayGraph:
    """the flattened, deduplicated graph as display nodes and edges."""
    return build_display_graph(registry, graph_id)
