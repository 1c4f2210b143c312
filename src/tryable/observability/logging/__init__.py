"""Observability – structured logging helpers."""
from tryable.observability.logging.factory import JsonLoggerFactory
from tryable.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
