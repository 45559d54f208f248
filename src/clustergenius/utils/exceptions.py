"""Custom exception classes for Cluster Genius."""
from typing import List


class ClusterGeniusError(Exception):
    """Base exception for Cluster Genius."""
    pass


class ConfigError(ClusterGeniusError):
    """Configuration-related errors."""
    pass


class InputFileError(ClusterGeniusError):
    """CSV file could not be opened or read."""
    pass


class AggregationError(ClusterGeniusError):
    """Transaction aggregation errors."""
    pass


class EmptyInputError(AggregationError):
    """No data rows to aggregate."""
    pass


class MissingAmountColumnError(AggregationError):
    """No column name looks like an amount column."""

    def __init__(self, columns: List[str]):
        self.columns = list(columns)
        super().__init__(
            f"Could not identify an 'Amount' column. Found columns: {', '.join(self.columns)}"
        )


class LLMError(ClusterGeniusError):
    """LLM classification errors."""
    pass


class ClassificationServiceError(LLMError):
    """Classifier call failed or returned no payload."""
    pass


class MalformedResponseError(LLMError):
    """Classifier payload does not match the expected shape."""
    pass


class SessionStateError(ClusterGeniusError):
    """Operation not allowed in the current session stage."""
    pass
