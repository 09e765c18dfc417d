"""Application layer: async queries over the domain."""
