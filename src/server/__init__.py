"""HTTP API for csvdoc."""
