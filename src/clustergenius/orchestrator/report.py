"""Join aggregated summaries with cluster assignments for display."""
from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..aggregation.models import AggregatedSummary
from ..llm.models import AnalysisResult, ClusterDefinition

UNASSIGNED_CLUSTER = "Unassigned"
UNASSIGNED_COLOR = "#cccccc"


@dataclass(frozen=True)
class EnrichedSummary:
    """Summary with its cluster name and color."""
    summary: AggregatedSummary
    cluster_name: str
    cluster_color: str


@dataclass(frozen=True)
class ClusterStats:
    """Per-cluster member count and average total amount."""
    cluster: ClusterDefinition
    count: int
    average_total_amount: float


def enrich(summaries: Sequence[AggregatedSummary], result: AnalysisResult) -> List[EnrichedSummary]:
    """Attach cluster name and color to each summary; first match wins."""
    assigned: Dict[str, str] = {}
    for assignment in result.assignments:
        assigned.setdefault(assignment.identifier, assignment.cluster_name)

    colors: Dict[str, str] = {}
    for cluster in result.clusters:
        colors.setdefault(cluster.name, cluster.color)

    enriched = []
    for summary in summaries:
        cluster_name = assigned.get(summary.identifier) or UNASSIGNED_CLUSTER
        enriched.append(EnrichedSummary(
            summary=summary,
            cluster_name=cluster_name,
            cluster_color=colors.get(cluster_name, UNASSIGNED_COLOR)
        ))
    return enriched


def cluster_stats(enriched: Sequence[EnrichedSummary], clusters: Sequence[ClusterDefinition]) -> List[ClusterStats]:
    stats = []
    for cluster in clusters:
        members = [e for e in enriched if e.cluster_name == cluster.name]
        count = len(members)
        average = sum(e.summary.total_amount for e in members) / count if count else 0.0
        stats.append(ClusterStats(cluster=cluster, count=count, average_total_amount=average))
    return stats


def top_by_total(enriched: Sequence[EnrichedSummary], limit: int = 10) -> List[EnrichedSummary]:
    return sorted(enriched, key=lambda e: e.summary.total_amount, reverse=True)[:limit]


def format_summary_table(summaries: Sequence[AggregatedSummary]) -> str:
    """Fixed-width table of aggregated summaries."""
    lines = [
        f"{'BA ID':<20} {'Total':>15} {'Count':>8} {'Average':>15} {'Std Dev':>15}",
        "-" * 77
    ]
    for s in summaries:
        lines.append(
            f"{s.identifier:<20} {s.total_amount:>15,.2f} {s.transaction_count:>8} "
            f"{s.average_amount:>15,.2f} {s.std_dev_amount:>15,.2f}"
        )
    return "\n".join(lines)


def format_enriched_table(enriched: Sequence[EnrichedSummary]) -> str:
    """Fixed-width table of BAs with their clusters."""
    lines = [
        f"{'BA ID':<20} {'Cluster':<25} {'Total':>15} {'Count':>8} {'Average':>15}",
        "-" * 87
    ]
    for e in enriched:
        s = e.summary
        lines.append(
            f"{s.identifier:<20} {e.cluster_name:<25} {s.total_amount:>15,.2f} "
            f"{s.transaction_count:>8} {s.average_amount:>15,.2f}"
        )
    return "\n".join(lines)


def format_cluster_cards(stats: Sequence[ClusterStats]) -> str:
    """One text block per cluster."""
    blocks = []
    for item in stats:
        blocks.append(
            f"[{item.cluster.color}] {item.cluster.name} ({item.count} BAs, "
            f"average total {item.average_total_amount:,.0f})\n    {item.cluster.description}"
        )
    return "\n".join(blocks)
