"""SQLite storage for graph definitions.

The nested schema is stored as one JSON document; name and timestamps
live in their own columns so listing never parses schemas.
"""

import os
import sqlite3
from pathlib import Path

from devgraph.models.graph_schema import GraphDefinition, GraphSchema


DEFAULT_DB_PATH = Path(__file__).parent / "data" / "devgraph.db"
GRAPH_DB_PATH = Path(os.getenv("GRAPH_DB_PATH", str(DEFAULT_DB_PATH)))

_COLUMNS = "graph_id, name, schema_json, created_at, updated_at"


def _connect() -> sqlite3.Connection:
    GRAPH_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(GRAPH_DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def _row_to_definition(row: sqlite3.Row) -> GraphDefinition:
    return GraphDefinition(
        graph_id=row["graph_id"],
        name=row["name"],
        graph_schema=GraphSchema.model_validate_json(row["schema_json"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def init_db() -> None:
    with _connect() as conn:
        conn.execute(
            """
            create table if not exists graph_definitions (
                graph_id text primary key,
                name text not null,
                schema_json text not null,
                created_at text not null,
                updated_at text not null
            )
            """
        )
        conn.execute(
            "create index if not exists idx_graph_definitions_name on graph_definitions(name)"
        )
        conn.commit()


def save_definition(definition: GraphDefinition) -> None:
    """store a definition, keeping the first created_at for an existing id."""
    with _connect() as conn:
        conn.execute(
            f"""
            insert into graph_definitions ({_COLUMNS}) values (?, ?, ?, ?, ?)
            on conflict(graph_id) do update set
                name = excluded.name,
                schema_json = excluded.schema_json,
                updated_at = excluded.updated_at
            """,
            (
                definition.graph_id,
                definition.name,
                definition.graph_schema.model_dump_json(),
                definition.created_at,
                definition.updated_at,
            ),
        )
        conn.commit()


def get_row(graph_id: str) -> sqlite3.Row | None:
    with _connect() as conn:
        return conn.execute(
            f"select {_COLUMNS} from graph_definitions where graph_id = ?",
            (graph_id,),
        ).fetchone()


def get_definition(graph_id: str) -> GraphDefinition | None:
    row = get_row(graph_id)
    if row is None:
        return None
    return _row_to_definition(row)


def get_schema_json(graph_id: str) -> str | None:
    with _connect() as conn:
        row = conn.execute(
            "select schema_json from graph_definitions where graph_id = ?",
            (graph_id,),
        ).fetchone()
    return row["schema_json"] if row else None


def list_graph_names() -> list[tuple[str, str]]:
    """(graph_id, name) pairs, most recently updated first."""
    with _connect() as conn:
        rows = conn.execute(
            "select graph_id, name from graph_definitions order by updated_at desc, rowid desc"
        ).fetchall()
    return [(row["graph_id"], row["name"]) for row in rows]


def delete_definition(graph_id: str) -> bool:
    with _connect() as conn:
        cursor = conn.execute("delete from graph_definitions where graph_id = ?", (graph_id,))
        conn.commit()
    return cursor.rowcount > 0
