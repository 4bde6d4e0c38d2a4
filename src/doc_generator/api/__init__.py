"""HTTP API for doc comment generation."""
