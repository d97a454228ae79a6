"""Observability – structured logging helpers."""
from mp_flags.observability.logging.factory import JsonLoggerFactory, level_from_name
from mp_flags.observability.logging.processors import SensitiveFieldsRedactor, get_logger

__all__ = ["JsonLoggerFactory", "SensitiveFieldsRedactor", "get_logger", "level_from_name"]
