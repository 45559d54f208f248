"""Analysis session: CSV -> aggregation -> classification."""
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from ..aggregation.aggregator import Aggregator, sort_by_total
from ..aggregation.loader import load_csv
from ..aggregation.models import AggregatedSummary
from ..llm.classifier import Classifier
from ..llm.models import AnalysisResult
from ..utils.logger import get_logger, set_source_context
from ..utils.exceptions import SessionStateError

logger = get_logger()


class Stage(Enum):
    UPLOAD = "upload"
    PROCESSING = "processing"
    ANALYZING = "analyzing"
    DONE = "done"


class AnalysisSession:
    """Holds the aggregated data and analysis result for one user session."""

    def __init__(self, classifier: Classifier, aggregator: Optional[Aggregator] = None):
        self.classifier = classifier
        self.aggregator = aggregator or Aggregator()
        self.stage = Stage.UPLOAD
        self.summaries: Optional[List[AggregatedSummary]] = None
        self.result: Optional[AnalysisResult] = None

    def load_rows(self, rows: Sequence[Mapping[str, Any]]) -> List[AggregatedSummary]:
        """Aggregate raw rows and move to the processing stage."""
        summaries = self.aggregator.aggregate(rows)
        self.summaries = summaries
        self.result = None
        self.stage = Stage.PROCESSING
        return summaries

    def load_file(self, path: Path) -> List[AggregatedSummary]:
        """Read and aggregate a CSV file."""
        path = Path(path)
        set_source_context(path.name)
        return self.load_rows(load_csv(path))

    def analyze(self) -> AnalysisResult:
        """
        Classify the loaded summaries, highest totals first.

        On failure the session returns to the processing stage so the
        analysis can be retried, and the error is re-raised.
        """
        if self.summaries is None:
            raise SessionStateError("No aggregated data loaded")
        if self.stage is Stage.ANALYZING:
            raise SessionStateError("Analysis already in progress")

        self.stage = Stage.ANALYZING
        try:
            result = self.classifier.classify(sort_by_total(self.summaries))
        except Exception as e:
            logger.error(f"Analysis failed: {e}")
            self.stage = Stage.PROCESSING
            raise

        self.result = result
        self.stage = Stage.DONE
        return result

    def run_file(self, path: Path) -> AnalysisResult:
        """Load a CSV file and analyze it straight away."""
        self.load_file(path)
        return self.analyze()

    def reset(self):
        """Discard data and results and return to the upload stage."""
        self.summaries = None
        self.result = None
        self.stage = Stage.UPLOAD
        set_source_context(None)
