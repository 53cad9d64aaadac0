"""Tests for the HTTP routes."""

import pytest
from fastapi.testclient import TestClient

from devgraph.models.graph_schema import GraphEdge, GraphNode, GraphSchema, NodeType
from devgraph.registry import InMemoryGraphRegistry
from devgraph.samples import sample_workflow
from devserver import graph_db
from devserver.app import create_app
from devserver.registry import SqliteGraphRegistry


def _broken_graph() -> GraphSchema:
    return GraphSchema(
        nodes=[
            GraphNode(key="A", type=NodeType.lambda_),
            GraphNode(key="C", type=NodeType.graph, graph_schema=GraphSchema(
                nodes=[GraphNode(key="L", type=NodeType.lambda_)],
            )),
        ],
        edges=[GraphEdge(source_node_key="A", target_node_key="C")],
    )


@pytest.fixture
def registry() -> InMemoryGraphRegistry:
    registry = InMemoryGraphRegistry()
    registry.register("qa", "QA Workflow", sample_workflow)
    registry.register("broken", "Broken", _broken_graph())
    return registry


@pytest.fixture
def client(registry):
    with TestClient(create_app(registry)) as client:
        yield client


class TestHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["registry"] == "InMemoryGraphRegistry"


class TestDebugViews:
    """HTML pages under /debug/v2."""

    def test_list_page_links_graphs(self, client):
        response = client.get("/debug/v2/graphs")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'href="/debug/v2/graphs/qa"' in response.text
        assert "qa/QA Workflow" in response.text

    def test_graph_page_embeds_flat_graph(self, client):
        response = client.get("/debug/v2/graphs/qa")
        assert response.status_code == 200
        assert "vis-network" in response.text
        assert '"key": "retriever"' in response.text
        assert '"label": "VectorRetriever"' in response.text
        assert '"from": "classify", "to": "answer_start"' in response.text
        # composite nodes never reach the page
        assert '"key": "answer"' not in response.text

    def test_unknown_graph_is_bad_request(self, client):
        response = client.get("/debug/v2/graphs/nope")
        assert response.status_code == 400
        assert response.json()["detail"] == "Graph not found: nope"

    def test_failing_factory_is_bad_request(self, client, registry):
        def factory():
            raise RuntimeError("boom")

        registry.register("bad", "Bad", factory)
        response = client.get("/debug/v2/graphs/bad")
        assert response.status_code == 400
        assert "boom" in response.json()["detail"]

    def test_malformed_graph_is_unprocessable(self, client):
        response = client.get("/debug/v2/graphs/broken")
        assert response.status_code == 422
        body = response.json()
        assert body["node"] == "C"
        assert body["missing"] == "start"


class TestFlatGraphApi:
    """JSON view of the flattened graph."""

    def test_flat_graph(self, client):
        response = client.get("/api/graphs/qa/flat")
        assert response.status_code == 200
        body = response.json()

        keys = {node["key"] for node in body["nodes"]}
        assert "answer" not in keys
        assert {"retrieval_start", "retriever", "rerank", "retrieval_end"} <= keys
        pairs = {(edge["from"], edge["to"]) for edge in body["edges"]}
        assert ("answer_end", "merge") in pairs
        assert all(a in keys and b in keys for a, b in pairs)

    def test_list_graphs(self, client):
        response = client.get("/api/graphs")
        assert response.status_code == 200
        assert {"id": "qa", "name": "QA Workflow", "href": "/debug/v2/graphs/qa"} in response.json()

    def test_upsert_refreshes_view(self, client):
        """A PUT replaces the definition and the next view reflects it."""
        client.get("/api/graphs/qa/flat")
        replacement = GraphSchema(
            nodes=[GraphNode(key="only", type=NodeType.lambda_)],
        )
        response = client.put(
            "/api/graphs/qa",
            json={"name": "QA Workflow", "graph_schema": replacement.model_dump(mode="json")},
        )
        assert response.status_code == 200

        body = client.get("/api/graphs/qa/flat").json()
        assert [node["key"] for node in body["nodes"]] == ["only"]


class TestSqliteBackedApp:
    """Definition CRUD through the SQLite registry."""

    @pytest.fixture
    def sqlite_client(self, tmp_path, monkeypatch):
        monkeypatch.setattr(graph_db, "GRAPH_DB_PATH", tmp_path / "graphs.db")
        with TestClient(create_app(SqliteGraphRegistry())) as client:
            yield client

    def test_put_get_delete(self, sqlite_client):
        schema = sample_workflow().model_dump(mode="json")

        created = sqlite_client.put("/api/graphs/qa", json={"name": "QA", "graph_schema": schema})
        assert created.status_code == 200

        fetched = sqlite_client.get("/api/graphs/qa")
        assert fetched.status_code == 200
        assert fetched.json()["graph_schema"] == schema

        updated = sqlite_client.put("/api/graphs/qa", json={"name": "QA v2", "graph_schema": schema})
        assert updated.json()["created_at"] == created.json()["created_at"]

        assert sqlite_client.delete("/api/graphs/qa").json() == {"deleted": "qa"}
        assert sqlite_client.get("/api/graphs/qa").status_code == 404
        assert sqlite_client.delete("/api/graphs/qa").status_code == 404

    def test_stored_graph_renders(self, sqlite_client):
        schema = sample_workflow().model_dump(mode="json")
        sqlite_client.put("/api/graphs/qa", json={"name": "QA", "graph_schema": schema})

        listing = sqlite_client.get("/api/graphs").json()
        assert [meta["id"] for meta in listing] == ["qa"]

        page = sqlite_client.get("/debug/v2/graphs/qa")
        assert page.status_code == 200
        assert '"key": "rerank"' in page.text

    def test_missing_definition(self, sqlite_client):
        assert sqlite_client.get("/api/graphs/nope").status_code == 404
        assert sqlite_client.get("/api/graphs/nope/flat").status_code == 400
