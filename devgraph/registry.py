"""Graph registries the debug view reads from.

A registry knows graph definitions by id and hands out a created canvas
(a read-only GraphSchema snapshot) for each. Canvases are built lazily
on first view and reused until the definition changes. The request
layer receives the registry as an explicit dependency.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from devgraph.errors import GraphCreationError, GraphNotFoundError
from devgraph.models.graph_schema import GraphDefinition, GraphSchema
from devgraph.utils.identifiers import utc_timestamp

logger = logging.getLogger(__name__)

GraphSource = GraphSchema | Callable[[], GraphSchema]


class GraphRegistry:
    """Protocol for storing definitions and creating graph canvases."""

    def __init__(self) -> None:
        self._canvases: dict[str, GraphSchema] = {}
        # bumped by forget(); a build only caches if its generation still holds
        self._generations: dict[str, int] = {}
        self._lock = threading.RLock()

    def get_graph(self, graph_id: str) -> GraphSchema | None:
        """Return the canvas already created for graph_id, if any."""
        with self._lock:
            return self._canvases.get(graph_id)

    def create_graph(self, graph_id: str) -> GraphSchema:
        """Build the canvas for graph_id from its definition.

        The canvas is not cached when the definition changed while it was
        being built; the caller still gets it, the next view rebuilds.

        Raises:
            GraphNotFoundError: nothing is registered under graph_id.
            GraphCreationError: the definition could not be built.
        """
        with self._lock:
            generation = self._generations.get(graph_id, 0)

        graph = self._build(graph_id)

        with self._lock:
            if self._generations.get(graph_id, 0) != generation:
                logger.info("definition of graph %s changed during build, not caching", graph_id)
                return graph
            self._canvases[graph_id] = graph
        logger.info("created canvas for graph %s", graph_id)
        return graph

    def load_graph(self, graph_id: str) -> GraphSchema:
        """Get the canvas for graph_id, creating it on first use."""
        graph = self.get_graph(graph_id)
        if graph is None:
            graph = self.create_graph(graph_id)
        return graph

    def forget(self, graph_id: str) -> None:
        """Drop a cached canvas so the next view rebuilds it."""
        with self._lock:
            self._canvases.pop(graph_id, None)
            self._generations[graph_id] = self._generations.get(graph_id, 0) + 1

    def list_graphs(self) -> dict[str, str]:
        """Map graph name to graph id."""
        raise NotImplementedError

    def get_definition(self, graph_id: str) -> GraphDefinition | None:
        raise NotImplementedError

    def save_definition(self, graph_id: str, name: str, schema: GraphSchema) -> GraphDefinition:
        """Create or replace the definition stored under graph_id."""
        raise NotImplementedError

    def delete_definition(self, graph_id: str) -> bool:
        """Remove a definition; False when there was none."""
        raise NotImplementedError

    def _build(self, graph_id: str) -> GraphSchema:
        raise NotImplementedError


def index_by_name(graphs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Map name to id from (graph_id, name) pairs; the later id wins a shared name."""
    index: dict[str, str] = {}
    for graph_id, name in graphs:
        if name in index:
            logger.warning(
                "graphs %s and %s share the name %r, listing only %s",
                index[name], graph_id, name, graph_id,
            )
        index[name] = graph_id
    return index


@dataclass
class _Entry:
    name: str
    source: GraphSource
    created_at: str
    updated_at: str


class InMemoryGraphRegistry(GraphRegistry):
    """Keeps definitions in process, as schemas or zero-argument factories."""

    def __init__(self) -> None:
        super().__init__()
        self._definitions: dict[str, _Entry] = {}

    def register(self, graph_id: str, name: str, source: GraphSource) -> None:
        now = utc_timestamp()
        with self._lock:
            existing = self._definitions.get(graph_id)
            self._definitions[graph_id] = _Entry(
                name=name,
                source=source,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            self.forget(graph_id)

    def list_graphs(self) -> dict[str, str]:
        with self._lock:
            pairs = [(graph_id, entry.name) for graph_id, entry in self._definitions.items()]
        return index_by_name(pairs)

    def get_definition(self, graph_id: str) -> GraphDefinition | None:
        with self._lock:
            entry = self._definitions.get(graph_id)
        if entry is None:
            return None
        return GraphDefinition(
            graph_id=graph_id,
            name=entry.name,
            graph_schema=self._build(graph_id),
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )

    def save_definition(self, graph_id: str, name: str, schema: GraphSchema) -> GraphDefinition:
        self.register(graph_id, name, schema)
        return self.get_definition(graph_id)

    def delete_definition(self, graph_id: str) -> bool:
        with self._lock:
            removed = self._definitions.pop(graph_id, None)
            self.forget(graph_id)
        return removed is not None

    def _build(self, graph_id: str) -> GraphSchema:
        with self._lock:
            entry = self._definitions.get(graph_id)
        if entry is None:
            raise GraphNotFoundError(graph_id)

        if isinstance(entry.source, GraphSchema):
            return entry.source.model_copy(deep=True)

        # factories run outside the lock and may re-enter register()
        try:
            graph = entry.source()
        except Exception as exc:
            raise GraphCreationError(graph_id, str(exc)) from exc
        if not isinstance(graph, GraphSchema):
            raise GraphCreationError(
                graph_id, f"factory returned {type(graph).__name__}, not GraphSchema"
            )
        return graph
