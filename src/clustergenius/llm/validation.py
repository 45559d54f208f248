"""Optional referential checks on a classification result."""
from dataclasses import dataclass, field
from typing import List, Sequence

from .models import AnalysisResult
from ..aggregation.models import AggregatedSummary


@dataclass
class AssignmentReport:
    """Inconsistencies between assignments, clusters and summaries."""
    unknown_clusters: List[str] = field(default_factory=list)
    unknown_identifiers: List[str] = field(default_factory=list)
    unassigned_identifiers: List[str] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return not (self.unknown_clusters or self.unknown_identifiers or self.unassigned_identifiers)


def validate_assignments(result: AnalysisResult, summaries: Sequence[AggregatedSummary]) -> AssignmentReport:
    """
    Compare assignments with defined clusters and the sampled summaries.

    Never raises; the caller decides what to do with the report.
    """
    cluster_names = {c.name for c in result.clusters}
    identifiers = [s.identifier for s in summaries]
    known_ids = set(identifiers)
    assigned_ids = {a.identifier for a in result.assignments}

    report = AssignmentReport()
    for assignment in result.assignments:
        if assignment.cluster_name not in cluster_names and assignment.cluster_name not in report.unknown_clusters:
            report.unknown_clusters.append(assignment.cluster_name)
        if assignment.identifier not in known_ids and assignment.identifier not in report.unknown_identifiers:
            report.unknown_identifiers.append(assignment.identifier)

    report.unassigned_identifiers = [i for i in identifiers if i not in assigned_ids]
    return report
