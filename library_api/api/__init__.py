"""HTTP layer: FastAPI routes, wire schemas and dependency wiring."""
