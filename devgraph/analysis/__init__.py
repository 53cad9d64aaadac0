"""Graph flattening and display helpers."""

from devgraph.analysis.dedupe import deduplicate
from devgraph.analysis.display import display_label, to_display_graph
from devgraph.analysis.flatten import find_terminals, flatten_graph

__all__ = [
    "deduplicate",
    "display_label",
    "find_terminals",
    "flatten_graph",
    "to_display_graph",
]
