"""Persistence adapters: SQLAlchemy database, repositories and in-memory stores."""
