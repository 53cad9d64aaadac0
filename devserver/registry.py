"""Registry backed by the SQLite graph store."""

from pydantic import ValidationError

from devgraph.errors import GraphCreationError, GraphNotFoundError
from devgraph.models.graph_schema import GraphDefinition, GraphSchema
from devgraph.registry import GraphRegistry, index_by_name
from devgraph.utils.identifiers import utc_timestamp
from devserver import graph_db


class SqliteGraphRegistry(GraphRegistry):
    """Reads definitions from the graph_definitions table, caches canvases in memory."""

    def list_graphs(self) -> dict[str, str]:
        # oldest first, so the most recently updated graph keeps a shared name
        return index_by_name(reversed(graph_db.list_graph_names()))

    def get_definition(self, graph_id: str) -> GraphDefinition | None:
        return graph_db.get_definition(graph_id)

    def save_definition(self, graph_id: str, name: str, schema: GraphSchema) -> GraphDefinition:
        now = utc_timestamp()
        existing = graph_db.get_definition(graph_id)
        definition = GraphDefinition(
            graph_id=graph_id,
            name=name,
            graph_schema=schema,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        graph_db.save_definition(definition)
        self.forget(graph_id)
        return definition

    def delete_definition(self, graph_id: str) -> bool:
        deleted = graph_db.delete_definition(graph_id)
        self.forget(graph_id)
        return deleted

    def _build(self, graph_id: str) -> GraphSchema:
        schema_json = graph_db.get_schema_json(graph_id)
        if schema_json is None:
            raise GraphNotFoundError(graph_id)
        try:
            return GraphSchema.model_validate_json(schema_json)
        except ValidationError as exc:
            raise GraphCreationError(graph_id, f"stored schema is invalid: {exc}") from exc
