"""Dashboard statistics derived from fight and fighter records."""

from .aggregation import (
    accuracy_sample,
    compute_dashboard,
    division_summary,
    fighter_summaries,
    filter_fights,
    finish_rate,
    format_rate,
    method_distribution,
    rank_by_wins,
    summarize_fighter,
    top_by_win_rate,
    top_by_wins,
)
from .models import (
    ALL,
    MAIN_DIVISIONS,
    MAIN_METHODS,
    AccuracyPoint,
    DashboardData,
    DivisionSummary,
    FighterSummary,
    MethodCount,
)

__all__ = [
    # Models
    "ALL",
    "MAIN_DIVISIONS",
    "MAIN_METHODS",
    "MethodCount",
    "DivisionSummary",
    "FighterSummary",
    "AccuracyPoint",
    "DashboardData",
    # Aggregation
    "compute_dashboard",
    "filter_fights",
    "method_distribution",
    "division_summary",
    "summarize_fighter",
    "fighter_summaries",
    "rank_by_wins",
    "top_by_wins",
    "top_by_win_rate",
    "accuracy_sample",
    "finish_rate",
    "format_rate",
]
