"""Register the sample nested workflow with a running server.

Usage:
    python -m devgraph.scripts.seed_graphs --base-url http://localhost:8000
"""

import argparse

from devgraph.samples import answer_subgraph, sample_workflow
from devgraph.sdk.client import DEFAULT_BASE_URL, GraphClient


def main():
    parser = argparse.ArgumentParser(description="Seed a devgraph server with sample graphs")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    args = parser.parse_args()

    with GraphClient(args.base_url) as client:
        client.register_graph("qa-workflow", "QA Workflow", sample_workflow())
        client.register_graph("answer-chain", "Answer Chain", answer_subgraph())

        for meta in client.list_graphs():
            flat = client.fetch_flat_graph(meta.id)
            print(f"{meta.name} ({meta.id})")
            print(f"  nodes: {len(flat.nodes)}  edges: {len(flat.edges)}")
            print(f"  view: {args.base_url.rstrip('/')}{meta.href}")

    print("Done!")


if __name__ == "__main__":
    main()
