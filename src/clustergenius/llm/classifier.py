"""Cluster classification contract.

Builds the request sent to an external classifier from aggregated
summaries and parses its structured reply. Provider adapters implement
``Classifier.classify`` on top of these helpers.
"""
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from .models import AnalysisResponse, AnalysisResult
from ..aggregation.models import AggregatedSummary
from ..utils.logger import get_logger
from ..utils.exceptions import ClassificationServiceError, MalformedResponseError

logger = get_logger()

DEFAULT_SAMPLE_SIZE = 150
MAX_SAMPLE_SIZE = 150
DEFAULT_CLUSTER_COUNT = 3
RESPONSE_SCHEMA = AnalysisResponse


def sample_records(
    summaries: Sequence[AggregatedSummary],
    sample_size: int = DEFAULT_SAMPLE_SIZE
) -> List[Dict[str, Any]]:
    """
    Serialize the first ``sample_size`` summaries into compact records.

    Never more than MAX_SAMPLE_SIZE records, whatever ``sample_size`` says.

    Callers sort by descending total beforehand so the highest-value BAs
    are the ones sent.
    """
    limit = min(max(sample_size, 0), MAX_SAMPLE_SIZE)
    return [
        {
            "id": s.identifier,
            "total": f"{s.total_amount:.2f}",
            "avg": f"{s.average_amount:.2f}",
            "count": s.transaction_count,
            "stdDev": f"{s.std_dev_amount:.2f}"
        }
        for s in list(summaries)[:limit]
    ]


def build_prompt(records: List[Dict[str, Any]], cluster_count: int = DEFAULT_CLUSTER_COUNT) -> str:
    """Build the clustering prompt."""
    return f"""I have transaction data for Business Associates (BAs).
Please analyze the following list of BA statistics (Total Amount, Average Amount, Transaction Count, StdDev).

Task:
1. Identify exactly {cluster_count} distinct clusters/segments based on their spending behavior (e.g., High Value, Frequent Small Spenders, Churn Risk, etc.).
2. Assign each BA provided in the list to exactly one of these clusters.

For each cluster provide a name, a short description and a hex color code suitable for charts (e.g., #FF5733).

Data:
{json.dumps(records, ensure_ascii=False)}
"""


def parse_response(response_text: Optional[str]) -> AnalysisResult:
    """
    Parse the classifier's JSON reply.

    Raises:
        ClassificationServiceError: the reply carries no text
        MalformedResponseError: the text is not JSON or does not match the schema
    """
    if not response_text:
        raise ClassificationServiceError("No response from classification service")

    try:
        data = json.loads(response_text)
        validated = RESPONSE_SCHEMA.model_validate(data)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response: {e}")
        logger.debug(f"Response text: {response_text[:500]}")
        raise MalformedResponseError(f"Invalid JSON response from LLM: {e}")
    except ValidationError as e:
        logger.error(f"Response validation failed: {e}")
        raise MalformedResponseError(f"LLM response does not match expected schema: {e}")

    return validated.to_result()


class Classifier(ABC):
    """Assigns aggregated BAs to behavioral clusters."""

    @abstractmethod
    def classify(self, summaries: Sequence[AggregatedSummary]) -> AnalysisResult:
        """Return cluster definitions and assignments for ``summaries``."""


class StaticClassifier(Classifier):
    """Returns a fixed result; used offline and in tests."""

    def __init__(self, result: AnalysisResult):
        self.result = result
        self.calls: List[List[AggregatedSummary]] = []

    def classify(self, summaries: Sequence[AggregatedSummary]) -> AnalysisResult:
        self.calls.append(list(summaries))
        return self.result
