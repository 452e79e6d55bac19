"""Command-line interface for vocab-service."""
