"""Tests for the HTTP client, against a mocked transport."""

import json

import httpx
import pytest

from devgraph.models.graph_schema import GraphSchema
from devgraph.samples import sample_workflow
from devgraph.sdk.client import GraphClient, register_graph
from devgraph.utils.identifiers import utc_timestamp


def _definition_body(graph_id: str, name: str, schema: GraphSchema) -> dict:
    now = utc_timestamp()
    return {
        "graph_id": graph_id,
        "name": name,
        "graph_schema": schema.model_dump(mode="json"),
        "created_at": now,
        "updated_at": now,
    }


class TestGraphClient:
    """Request shapes and response parsing."""

    def test_register_graph_puts_definition(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_definition_body("qa", "QA", sample_workflow()))

        with GraphClient("http://devgraph.test", transport=httpx.MockTransport(handler)) as client:
            definition = client.register_graph("qa", "QA", sample_workflow())

        assert seen["method"] == "PUT"
        assert seen["path"] == "/api/graphs/qa"
        assert seen["body"]["name"] == "QA"
        assert GraphSchema.model_validate(seen["body"]["graph_schema"]) == sample_workflow()
        assert definition.graph_id == "qa"

    def test_fetch_flat_graph(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/graphs/qa/flat"
            return httpx.Response(200, json={
                "graph_id": "qa",
                "nodes": [{"key": "a", "label": "A", "type": "start"}],
                "edges": [{"from": "a", "to": "b"}],
            })

        with GraphClient("http://devgraph.test", transport=httpx.MockTransport(handler)) as client:
            flat = client.fetch_flat_graph("qa")

        assert flat.nodes[0].label == "A"
        assert flat.edges[0].from_ == "a"
        assert flat.edges[0].to == "b"

    def test_list_graphs(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[
                {"id": "qa", "name": "QA", "href": "/debug/v2/graphs/qa"},
            ])

        with GraphClient("http://devgraph.test", transport=httpx.MockTransport(handler)) as client:
            metas = client.list_graphs()

        assert [meta.id for meta in metas] == ["qa"]

    def test_error_status_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"detail": "Graph not found: nope"})

        with GraphClient("http://devgraph.test", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.HTTPStatusError):
                client.fetch_flat_graph("nope")


class TestRegisterGraphHelper:
    """register_graph warns instead of raising when the server is away."""

    def test_warns_when_server_unreachable(self):
        with pytest.warns(UserWarning, match="failed to register graph"):
            result = register_graph(
                sample_workflow(),
                name="QA Workflow",
                base_url="http://127.0.0.1:9",
                timeout=0.5,
            )
        assert result is None
