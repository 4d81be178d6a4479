"""Domain layer: entities, store abstractions and services."""
