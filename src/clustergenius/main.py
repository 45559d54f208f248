"""Command-line entry point for Cluster Genius."""
import sys
import json
import argparse
from dataclasses import asdict
from pathlib import Path

from .aggregation.aggregator import Aggregator, sort_by_total
from .aggregation.columns import ColumnStrategy
from .config.settings import AppSettings
from .llm.gemini_classifier import GeminiClassifier
from .orchestrator.session import AnalysisSession
from .orchestrator.report import (
    enrich,
    cluster_stats,
    top_by_total,
    format_summary_table,
    format_enriched_table,
    format_cluster_cards
)
from .utils.logger import configure_logging, get_logger
from .utils.exceptions import ClusterGeniusError

logger = get_logger()


def _build_session(settings: AppSettings) -> AnalysisSession:
    """Create a session wired to Gemini and the configured column keywords."""
    classifier = GeminiClassifier(
        api_key=settings.api_key(),
        model_name=settings.llm_model_name,
        sample_size=settings.llm_sample_size,
        cluster_count=settings.llm_cluster_count
    )
    strategy = ColumnStrategy.from_keywords(settings.identifier_keywords, settings.amount_keywords)
    return AnalysisSession(classifier, Aggregator(strategy))


def aggregate_command(session: AnalysisSession, path: Path, top: int) -> None:
    """Print aggregated statistics without calling the classifier."""
    summaries = sort_by_total(session.load_file(path))
    print(f"\n{len(summaries)} BAs aggregated from {path.name}\n")
    print(format_summary_table(summaries[:top]))


def analyze_command(session: AnalysisSession, path: Path, top: int, as_json: bool) -> None:
    """Aggregate, classify and print the cluster report."""
    result = session.run_file(path)
    enriched = enrich(session.summaries, result)

    if as_json:
        print(json.dumps({
            "summaries": [asdict(s) for s in sort_by_total(session.summaries)],
            "clusters": [asdict(c) for c in result.clusters],
            "assignments": [{"baId": a.identifier, "clusterName": a.cluster_name} for a in result.assignments]
        }, ensure_ascii=False, indent=2))
        return

    print("\nClusters:\n")
    print(format_cluster_cards(cluster_stats(enriched, result.clusters)))
    print(f"\nTop {top} BAs by total amount:\n")
    print(format_enriched_table(top_by_total(enriched, top)))


def main(argv=None):
    """Main entry point for Cluster Genius."""
    parser = argparse.ArgumentParser(description="BA transaction clustering with Gemini")
    parser.add_argument(
        "command",
        choices=["aggregate", "analyze"],
        help="aggregate: statistics only; analyze: statistics plus AI clustering"
    )
    parser.add_argument("csv_file", type=Path, help="Transaction CSV with a header row")
    parser.add_argument("--top", type=int, default=10, help="Number of BAs to list (default: 10)")
    parser.add_argument("--json", action="store_true", help="Print analysis result as JSON")
    parser.add_argument("--config", type=Path, help="Alternative config.yaml")

    args = parser.parse_args(argv)

    try:
        settings = AppSettings.load(args.config)
        # JSON output owns stdout
        configure_logging(
            settings.log_level,
            settings.log_max_file_size_mb,
            settings.log_backup_count,
            console_stream=sys.stderr if args.json else sys.stdout
        )
        logger.info(f"{settings.app_name} {settings.app_version} starting")

        session = _build_session(settings)
        if args.command == "aggregate":
            aggregate_command(session, args.csv_file, args.top)
        else:
            analyze_command(session, args.csv_file, args.top, args.json)
    except ClusterGeniusError as e:
        logger.error(f"{type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
