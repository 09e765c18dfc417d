"""Infrastructure layer: configuration, logging and port adapters."""
