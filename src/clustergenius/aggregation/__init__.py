"""Transaction aggregation module."""
from .models import AggregatedSummary
from .columns import ColumnStrategy, DEFAULT_STRATEGY, keyword_matcher
from .aggregator import Aggregator, parse_amount, sort_by_total, UNKNOWN_IDENTIFIER
from .loader import load_csv, read_rows

__all__ = [
    "AggregatedSummary",
    "ColumnStrategy",
    "DEFAULT_STRATEGY",
    "keyword_matcher",
    "Aggregator",
    "parse_amount",
    "sort_by_total",
    "UNKNOWN_IDENTIFIER",
    "load_csv",
    "read_rows"
]
