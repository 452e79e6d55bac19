"""FastAPI application: factory, lifespan, middleware and router wiring."""
