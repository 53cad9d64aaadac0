"""Sample nested workflows for demos and the seed script."""

from devgraph.models.graph_schema import (
    ComponentSchema,
    GraphEdge,
    GraphNode,
    GraphSchema,
    NodeType,
)


def _edge(source: str, target: str) -> GraphEdge:
    return GraphEdge(source_node_key=source, target_node_key=target)


def retrieval_subgraph() -> GraphSchema:
    """start -> retriever -> rerank -> end, wrapped by the sample workflow."""
    return GraphSchema(
        name="retrieval",
        nodes=[
            GraphNode(key="retrieval_start", type=NodeType.start),
            GraphNode(
                key="retriever",
                type=NodeType.retriever,
                component_schema=ComponentSchema(name="VectorRetriever", component="Retriever"),
            ),
            GraphNode(key="rerank", type=NodeType.lambda_, name="Rerank"),
            GraphNode(key="retrieval_end", type=NodeType.end),
        ],
        edges=[
            _edge("retrieval_start", "retriever"),
            _edge("retriever", "rerank"),
            _edge("rerank", "retrieval_end"),
        ],
    )


def answer_subgraph() -> GraphSchema:
    """a chain that itself nests the retrieval graph."""
    return GraphSchema(
        name="answer",
        nodes=[
            GraphNode(key="answer_start", type=NodeType.start),
            GraphNode(key="retrieval", type=NodeType.graph, graph_schema=retrieval_subgraph()),
            GraphNode(key="prompt", type=NodeType.chat_template, name="Prompt"),
            GraphNode(key="model", type=NodeType.chat_model, name="ChatModel"),
            GraphNode(key="answer_end", type=NodeType.end),
        ],
        edges=[
            _edge("answer_start", "retrieval"),
            _edge("retrieval", "prompt"),
            _edge("prompt", "model"),
            _edge("model", "answer_end"),
        ],
    )


def sample_workflow() -> GraphSchema:
    """Top-level workflow with two levels of nesting and a branch."""
    return GraphSchema(
        name="qa-workflow",
        nodes=[
            GraphNode(key="start", type=NodeType.start),
            GraphNode(key="classify", type=NodeType.branch, name="Classify"),
            GraphNode(key="answer", type=NodeType.chain, graph_schema=answer_subgraph()),
            GraphNode(key="smalltalk", type=NodeType.lambda_, name="Small talk"),
            GraphNode(key="merge", type=NodeType.passthrough),
            GraphNode(key="end", type=NodeType.end),
        ],
        edges=[
            _edge("start", "classify"),
            _edge("classify", "answer"),
            _edge("classify", "smalltalk"),
            _edge("answer", "merge"),
            _edge("smalltalk", "merge"),
            _edge("merge", "end"),
        ],
    )
