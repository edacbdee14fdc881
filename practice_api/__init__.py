"""Guitar practice API server."""
