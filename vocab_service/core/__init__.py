"""Core building blocks shared across features (settings, exceptions, schemas)."""
