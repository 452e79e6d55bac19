"""Infrastructure adapters (logging, file persistence)."""
