"""HTML debug views: the graph list and one flattened graph."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from devgraph.registry import GraphRegistry
from devserver.dependencies import get_registry
from devserver.graph_routes import build_display_graph, list_graph_meta
from devserver.templates import DEBUG_PREFIX, render_graph_list, render_graph_page

router = APIRouter(prefix=DEBUG_PREFIX)


@router.get("/graphs", response_class=HTMLResponse)
def show_graphs(registry: GraphRegistry = Depends(get_registry)) -> HTMLResponse:
    """links to every known graph."""
    return HTMLResponse(render_graph_list(list_graph_meta(registry), home=f"{DEBUG_PREFIX}/graphs"))


@router.get("/graphs/{graph_id}", response_class=HTMLResponse)
def draw_graph(graph_id: str, registry: GraphRegistry = Depends(get_registry)) -> HTMLResponse:
    """render the flattened graph with vis-network."""
    display = build_display_graph(registry, graph_id)
    return HTMLResponse(render_graph_page(display, title=f"Workflow Visualization - {graph_id}"))
