"""HTTP server for the devgraph debug view."""
