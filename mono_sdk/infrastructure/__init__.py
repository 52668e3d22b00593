"""Infrastructure layer - HTTP transport, authentication and resource clients."""
