"""HTTP API surface built on FastAPI."""
