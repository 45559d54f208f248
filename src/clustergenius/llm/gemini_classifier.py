"""Cluster classification using the native Google AI SDK."""
from typing import Optional, Sequence

from google import genai
from google.genai import types

from .classifier import (
    Classifier,
    DEFAULT_CLUSTER_COUNT,
    DEFAULT_SAMPLE_SIZE,
    MAX_SAMPLE_SIZE,
    RESPONSE_SCHEMA,
    build_prompt,
    parse_response,
    sample_records
)
from .models import AnalysisResult
from ..aggregation.models import AggregatedSummary
from ..utils.logger import get_logger
from ..utils.exceptions import ClassificationServiceError

logger = get_logger()


class GeminiClassifier(Classifier):
    """Clusters BAs with a single Gemini structured-output call."""

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = "gemini-2.5-flash",
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        cluster_count: int = DEFAULT_CLUSTER_COUNT,
        client=None
    ):
        """
        Initialize Gemini classifier.

        Args:
            api_key: Google AI API key; None still allows a (failing) call
            model_name: Gemini model to call
            sample_size: Maximum number of BAs sent per request
            cluster_count: Number of clusters requested
            client: Pre-built genai client, mainly for tests
        """
        if not api_key:
            logger.warning("API key is missing in environment variables.")
        if sample_size > MAX_SAMPLE_SIZE:
            logger.warning(f"Sample size {sample_size} capped at {MAX_SAMPLE_SIZE} BAs per request")

        self.api_key = api_key or ""
        self.model_name = model_name
        self.sample_size = sample_size
        self.cluster_count = cluster_count
        self._client = client

        logger.info(f"Gemini classifier initialized with {self.model_name}")

    def _get_client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def classify(self, summaries: Sequence[AggregatedSummary]) -> AnalysisResult:
        """
        Cluster the highest-priority summaries.

        Args:
            summaries: Summaries sorted by descending total amount

        Returns:
            AnalysisResult with cluster definitions and assignments
        """
        records = sample_records(summaries, self.sample_size)
        prompt = build_prompt(records, self.cluster_count)

        logger.info(f"Requesting {self.cluster_count} clusters for {len(records)} BAs from {self.model_name}")

        try:
            response = self._get_client().models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=RESPONSE_SCHEMA
                )
            )
        except Exception as e:
            logger.error(f"Gemini request failed: {e}")
            raise ClassificationServiceError(f"Classification request failed: {e}")

        result = parse_response(response.text)

        logger.info(
            f"Received {len(result.clusters)} clusters and "
            f"{len(result.assignments)} assignments"
        )
        return result
