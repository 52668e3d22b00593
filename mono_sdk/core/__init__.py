"""Cross-cutting configuration, logging and metrics."""
