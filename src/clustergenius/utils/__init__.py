"""Utility modules."""
from .logger import get_logger, configure_logging, set_source_context
from .exceptions import (
    ClusterGeniusError,
    ConfigError,
    InputFileError,
    AggregationError,
    EmptyInputError,
    MissingAmountColumnError,
    LLMError,
    ClassificationServiceError,
    MalformedResponseError,
    SessionStateError
)

__all__ = [
    "get_logger",
    "configure_logging",
    "set_source_context",
    "ClusterGeniusError",
    "ConfigError",
    "InputFileError",
    "AggregationError",
    "EmptyInputError",
    "MissingAmountColumnError",
    "LLMError",
    "ClassificationServiceError",
    "MalformedResponseError",
    "SessionStateError"
]
