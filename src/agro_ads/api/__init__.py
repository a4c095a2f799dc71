"""HTTP API for ad generation."""
