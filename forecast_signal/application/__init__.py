"""Application layer: services orchestrating the use cases."""
