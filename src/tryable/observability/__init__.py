"""Observability – structured logging for classification events."""
