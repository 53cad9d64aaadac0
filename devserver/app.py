"""FastAPI application serving the graph debug view."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from devgraph.errors import GraphCreationError, GraphNotFoundError, MalformedGraphError
from devgraph.registry import GraphRegistry
from devserver import graph_db
from devserver.debug_routes import router as debug_router
from devserver.graph_routes import router as graph_router
from devserver.registry import SqliteGraphRegistry
from devserver.templates import DEBUG_PREFIX

load_dotenv()  # load environment variables from .env file

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS origins - configurable via environment variable
# Use comma-separated values for multiple origins, or "*" for all (development only)
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database tables on startup."""
    if isinstance(app.state.registry, SqliteGraphRegistry):
        graph_db.init_db()
        logger.info("graph store at %s", graph_db.GRAPH_DB_PATH)
    yield


async def _bad_graph_request(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _malformed_graph(request: Request, exc: MalformedGraphError) -> JSONResponse:
    logger.error("cannot flatten graph at %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "node": exc.composite_key,
            "missing": exc.missing,
        },
    )


def create_app(registry: GraphRegistry | None = None) -> FastAPI:
    """Build the app around a registry; defaults to the SQLite-backed one."""
    app = FastAPI(
        title="devgraph",
        description="Debug view for nested workflow graphs",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.registry = registry if registry is not None else SqliteGraphRegistry()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # not-found and creation failures are bad input, not server faults
    app.add_exception_handler(GraphNotFoundError, _bad_graph_request)
    app.add_exception_handler(GraphCreationError, _bad_graph_request)
    app.add_exception_handler(MalformedGraphError, _malformed_graph)

    app.include_router(graph_router, prefix="/api")
    app.include_router(debug_router)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {
            "status": "ok",
            "version": "0.1.0",
            "registry": type(app.state.registry).__name__,
            "endpoints": {
                "graphs": "/api/graphs",
                "flat": "/api/graphs/{graph_id}/flat",
                "debug": f"{DEBUG_PREFIX}/graphs",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
