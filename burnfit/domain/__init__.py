"""Domain layer: pure, synchronous business logic."""
