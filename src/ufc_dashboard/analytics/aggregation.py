"""Aggregation of fight and fighter records into dashboard statistics."""

import logging
from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ..data.models import FightRecord, FighterRecord
from .models import (
    ALL,
    DECISION,
    KNOCKOUT,
    MAX_ACCURACY_POINTS,
    MAX_DIVISIONS,
    MAX_TOP_FIGHTERS,
    MIN_ACCURACY_FIGHTS,
    MIN_DIVISION_FIGHTS,
    MIN_WIN_RATE_FIGHTS,
    SUBMISSION,
    AccuracyPoint,
    DashboardData,
    DivisionSummary,
    FighterSummary,
    MethodCount,
)

logger = logging.getLogger(__name__)


def format_rate(count: int, total: int) -> str:
    """
    Format count/total as a percentage with one decimal place.

    Halves round away from zero on the exact binary value, so 37.25
    becomes "37.3". Returns "0.0" when total is zero.
    """
    if total <= 0:
        return "0.0"
    pct = Decimal(count / total * 100)
    return str(pct.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def filter_fights(
    fights: Sequence[FightRecord],
    division: str = ALL,
    method: str = ALL,
) -> list[FightRecord]:
    """Restrict fights to a division and an exact method string."""
    filtered = list(fights)
    if division != ALL:
        filtered = [f for f in filtered if f.division == division]
        logger.debug(f"Fights after division filter: {len(filtered)}")
    if method != ALL:
        filtered = [f for f in filtered if f.method == method]
        logger.debug(f"Fights after method filter: {len(filtered)}")
    return filtered


def method_distribution(fights: Sequence[FightRecord]) -> list[MethodCount]:
    """
    Count fights per method, most common first.

    Methods with equal counts keep the order they were first seen in.
    """
    counts = Counter(f.method for f in fights if f.method)
    return [MethodCount(method=m, count=c) for m, c in counts.most_common()]


def division_summary(fights: Sequence[FightRecord]) -> list[DivisionSummary]:
    """
    Summarize outcome rates for the busiest divisions.

    Only divisions with more than MIN_DIVISION_FIGHTS fights are kept,
    largest first, at most MAX_DIVISIONS of them.
    """
    # division -> [total, submissions, knockouts, decisions]
    tallies: dict[str, list[int]] = {}
    for fight in fights:
        if not fight.division:
            continue
        tally = tallies.setdefault(fight.division, [0, 0, 0, 0])
        tally[0] += 1
        if fight.method == SUBMISSION:
            tally[1] += 1
        elif fight.method == KNOCKOUT:
            tally[2] += 1
        elif DECISION in fight.method:
            tally[3] += 1

    busiest = sorted(
        (item for item in tallies.items() if item[1][0] > MIN_DIVISION_FIGHTS),
        key=lambda item: item[1][0],
        reverse=True,
    )[:MAX_DIVISIONS]

    return [
        DivisionSummary(
            division=division,
            count=total,
            submissions=subs,
            knockouts=kos,
            decisions=decs,
            submission_rate=format_rate(subs, total),
            knockout_rate=format_rate(kos, total),
            decision_rate=format_rate(decs, total),
        )
        for division, (total, subs, kos, decs) in busiest
    ]


def summarize_fighter(fighter: FighterRecord) -> FighterSummary:
    """Derive total fights and win rate for a fighter."""
    total = fighter.wins + fighter.losses + fighter.draws
    win_rate = fighter.wins / total * 100 if total else 0.0
    return FighterSummary(fighter=fighter, total_fights=total, win_rate=win_rate)


def fighter_summaries(fighters: Sequence[FighterRecord]) -> list[FighterSummary]:
    """Summaries for every fighter with at least one recorded fight."""
    summaries = (summarize_fighter(f) for f in fighters)
    return [s for s in summaries if s.total_fights > 0]


def rank_by_wins(summaries: Sequence[FighterSummary]) -> list[FighterSummary]:
    """Order fighters by wins, most first; equal wins keep their order."""
    return sorted(summaries, key=lambda s: s.wins, reverse=True)


def top_by_wins(
    summaries: Sequence[FighterSummary], limit: int = MAX_TOP_FIGHTERS
) -> list[FighterSummary]:
    return rank_by_wins(summaries)[:limit]


def top_by_win_rate(
    summaries: Sequence[FighterSummary],
    min_fights: int = MIN_WIN_RATE_FIGHTS,
    limit: int = MAX_TOP_FIGHTERS,
) -> list[FighterSummary]:
    eligible = [s for s in summaries if s.total_fights >= min_fights]
    return sorted(eligible, key=lambda s: s.win_rate, reverse=True)[:limit]


def accuracy_sample(
    summaries: Sequence[FighterSummary],
    min_fights: int = MIN_ACCURACY_FIGHTS,
    limit: int = MAX_ACCURACY_POINTS,
) -> list[AccuracyPoint]:
    """
    Points for the striking accuracy vs win rate chart.

    Takes the first eligible fighters in the given order; no extra sorting.
    """
    eligible = [s for s in summaries if s.str_acc > 0 and s.total_fights >= min_fights]
    return [
        AccuracyPoint(
            name=s.name,
            accuracy=s.str_acc,
            win_rate=s.win_rate,
            total_fights=s.total_fights,
        )
        for s in eligible[:limit]
    ]


def finish_rate(fights: Sequence[FightRecord]) -> str:
    """Share of fights that did not end in a decision."""
    finishes = sum(1 for f in fights if DECISION not in f.method)
    return format_rate(finishes, len(fights))


def compute_dashboard(
    fights: Sequence[FightRecord],
    fighters: Sequence[FighterRecord],
    division: str = ALL,
    method: str = ALL,
) -> DashboardData:
    """
    Build the dashboard view-model.

    The division and method filters apply to the method distribution and
    the headline counts. Division statistics always use every fight, and
    fighter rankings do not depend on fights at all. The accuracy
    sample is drawn from fighters ranked by wins, so it shows the most
    successful eligible fighters.

    Args:
        fights: All parsed fights
        fighters: All parsed fighters
        division: Division to show, or ALL
        method: Exact method to show, or ALL

    Returns:
        DashboardData; empty if either collection is empty
    """
    if not fights or not fighters:
        logger.debug("No data available for processing")
        return DashboardData.empty()

    filtered = filter_fights(fights, division=division, method=method)
    summaries = fighter_summaries(fighters)
    ranked = rank_by_wins(summaries)

    return DashboardData(
        method_data=method_distribution(filtered),
        division_data=division_summary(fights),
        top_fighters=ranked[:MAX_TOP_FIGHTERS],
        top_win_rate_fighters=top_by_win_rate(summaries),
        accuracy_data=accuracy_sample(ranked),
        total_fights=len(filtered),
        title_fights=sum(1 for f in filtered if f.is_title_fight),
        finish_rate=finish_rate(filtered),
        total_fighters=len(fighters),
    )
