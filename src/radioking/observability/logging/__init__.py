"""Observability – structlog configuration and helpers."""
from radioking.observability.logging.factory import JsonLoggerFactory
from radioking.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "get_logger"]
