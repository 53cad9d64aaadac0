"""ID and timestamp utilities."""

import re
from datetime import datetime, timezone


def slugify(value: str) -> str:
    """Turn a display name into a url-safe graph id."""
    normalized = re.sub(r"[^a-zA-Z0-9_-]+", "-", value).strip("-").lower()
    return normalized or "graph"


def utc_timestamp() -> str:
    """Generate an ISO8601 UTC timestamp."""
    return datetime.now(timezone.utc).isoformat()
