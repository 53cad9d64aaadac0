"""Utility functions for devgraph."""

from devgraph.utils.identifiers import slugify, utc_timestamp

__all__ = [
    "slugify",
    "utc_timestamp",
]
