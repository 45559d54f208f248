"""Data models for transaction aggregation."""
import math
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class AggregatedSummary:
    """Summary statistics for one BA identifier."""
    identifier: str
    total_amount: float
    transaction_count: int
    average_amount: float
    std_dev_amount: float  # population standard deviation

    @classmethod
    def from_amounts(cls, identifier: str, amounts: List[float]) -> "AggregatedSummary":
        """Compute total, count, mean and population std dev of ``amounts``."""
        total = sum(amounts)
        count = len(amounts)
        average = total / count if count else math.nan
        variance = sum((value - average) ** 2 for value in amounts) / count if count else math.nan
        return cls(
            identifier=identifier,
            total_amount=total,
            transaction_count=count,
            average_amount=average,
            std_dev_amount=math.sqrt(variance)
        )
