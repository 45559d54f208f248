"""Column inference for transaction CSV headers.

Column names vary by export source, so the BA identifier and the amount
column are picked by matching header names. A ``ColumnStrategy`` holds
ordered lists of predicates; for each predicate in turn the first column
it accepts (in header order) is selected.
"""
from dataclasses import dataclass
from typing import Callable, List, Sequence

from ..utils.exceptions import EmptyInputError, MissingAmountColumnError

ColumnMatcher = Callable[[str], bool]

IDENTIFIER_KEYWORDS = ("ba", "customer", "id")
AMOUNT_KEYWORDS = ("amount", "net", "value", "dmbtr")


def keyword_matcher(*keywords: str) -> ColumnMatcher:
    """Match column names containing any of ``keywords`` (case-insensitive)."""
    lowered = tuple(k.lower() for k in keywords)

    def matches(column: str) -> bool:
        name = column.lower()
        return any(k in name for k in lowered)

    return matches


@dataclass(frozen=True)
class ColumnStrategy:
    """Ordered predicates for choosing identifier and amount columns."""
    identifier_matchers: Sequence[ColumnMatcher]
    amount_matchers: Sequence[ColumnMatcher]

    @classmethod
    def from_keywords(cls, identifier_keywords: Sequence[str], amount_keywords: Sequence[str]) -> "ColumnStrategy":
        return cls(
            identifier_matchers=(keyword_matcher(*identifier_keywords),),
            amount_matchers=(keyword_matcher(*amount_keywords),)
        )

    def identifier_column(self, columns: List[str]) -> str:
        """First matching column, or the first column when nothing matches."""
        if not columns:
            raise EmptyInputError("CSV file has no columns")

        for matcher in self.identifier_matchers:
            for column in columns:
                if matcher(column):
                    return column
        return columns[0]

    def amount_column(self, columns: List[str], identifier_column: str) -> str:
        """First matching column other than the identifier column."""
        for matcher in self.amount_matchers:
            for column in columns:
                if column != identifier_column and matcher(column):
                    return column
        raise MissingAmountColumnError(columns)


DEFAULT_STRATEGY = ColumnStrategy.from_keywords(IDENTIFIER_KEYWORDS, AMOUNT_KEYWORDS)
