"""Transaction aggregation module."""
import math
from collections import defaultdict
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .models import AggregatedSummary
from .columns import ColumnStrategy, DEFAULT_STRATEGY
from ..utils.logger import get_logger
from ..utils.exceptions import EmptyInputError

logger = get_logger()

UNKNOWN_IDENTIFIER = "Unknown"


def parse_amount(value: Any) -> Optional[float]:
    """
    Parse an amount cell such as ``"1,000.00"``.

    Returns:
        The amount, or None when the cell is empty or not numeric
    """
    if value is None:
        return None

    text = str(value).replace(",", "").strip()
    try:
        amount = float(text)
    except ValueError:
        return None

    if math.isnan(amount):
        return None
    return amount


def sort_by_total(summaries: Sequence[AggregatedSummary]) -> List[AggregatedSummary]:
    """Order summaries by descending total amount."""
    return sorted(summaries, key=lambda s: s.total_amount, reverse=True)


class Aggregator:
    """Aggregates raw transaction rows by BA identifier."""

    def __init__(self, strategy: ColumnStrategy = DEFAULT_STRATEGY):
        self.strategy = strategy

    def aggregate(self, rows: Sequence[Mapping[str, Any]]) -> List[AggregatedSummary]:
        """
        Aggregate transaction rows into one summary per identifier.

        Args:
            rows: Raw CSV rows keyed by column name

        Returns:
            List of AggregatedSummary objects, in order of first appearance
        """
        if not rows:
            raise EmptyInputError("CSV file is empty")

        columns = [key for key in rows[0].keys() if key is not None]
        id_column = self.strategy.identifier_column(columns)
        amount_column = self.strategy.amount_column(columns, id_column)

        amounts_by_id: Dict[str, List[float]] = defaultdict(list)
        skipped = 0

        for index, row in enumerate(rows):
            raw_id = row.get(id_column)
            identifier = str(raw_id) if raw_id not in (None, "") else UNKNOWN_IDENTIFIER

            amount = parse_amount(row.get(amount_column))
            if amount is None:
                skipped += 1
                logger.debug(f"Row {index}: non-numeric amount {row.get(amount_column)!r} skipped")
                continue

            amounts_by_id[identifier].append(amount)

        summaries = [
            AggregatedSummary.from_amounts(identifier, amounts)
            for identifier, amounts in amounts_by_id.items()
        ]

        logger.info(
            f"Aggregated {len(rows)} rows into {len(summaries)} BAs "
            f"(id column '{id_column}', amount column '{amount_column}', "
            f"{skipped} non-numeric amounts skipped)"
        )

        return summaries
