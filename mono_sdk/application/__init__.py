"""Application layer - use cases built on the resource clients."""
