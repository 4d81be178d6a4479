"""HTTP API: FastAPI application, routes and payload models."""
