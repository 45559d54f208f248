"""Session orchestration and reporting."""
from .session import AnalysisSession, Stage
from .report import (
    EnrichedSummary,
    ClusterStats,
    enrich,
    cluster_stats,
    top_by_total,
    UNASSIGNED_CLUSTER,
    UNASSIGNED_COLOR
)

__all__ = [
    "AnalysisSession",
    "Stage",
    "EnrichedSummary",
    "ClusterStats",
    "enrich",
    "cluster_stats",
    "top_by_total",
    "UNASSIGNED_CLUSTER",
    "UNASSIGNED_COLOR"
]
