"""Dynadocs - schema-validated dynamic document store.

Collections are defined at runtime by a schema; every document written to a
collection is validated against it.
"""

__version__ = "0.1.0"
