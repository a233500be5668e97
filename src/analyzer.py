"""
Workout data analyzer.

Provides functions for summarizing workout rows against a weekly goal
and grouping minutes for charts.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional

from .models import WorkoutSummary
from .workout_reader import (
    count_workouts,
    get_cell,
    parse_minutes,
    total_workout_minutes,
)


logger = logging.getLogger(__name__)


UNKNOWN_TYPE = "unknown"


async def summarize_workouts(
    rows: List[Any], weekly_goal: Optional[float] = None
) -> WorkoutSummary:
    """
    Build a summary of workout rows.

    Parameters:
        rows: Workout rows as loaded from CSV.
        weekly_goal: Weekly goal in minutes, if any.

    Returns:
        WorkoutSummary with count, total minutes and goal.
    """
    return WorkoutSummary(
        workouts=await count_workouts(rows),
        total_minutes=await total_workout_minutes(rows),
        weekly_goal=weekly_goal,
    )


def calculate_minutes_by_type(rows: List[Any]) -> Dict[str, float]:
    """Total minutes per workout type, in order of first appearance."""
    by_type: Dict[str, float] = defaultdict(float)

    for row in rows:
        workout_type = get_cell(row, "type").strip().lower() or UNKNOWN_TYPE
        by_type[workout_type] += parse_minutes(get_cell(row, "minutes"))

    return dict(by_type)


def calculate_daily_minutes(rows: List[Any]) -> List[Dict]:
    """
    Total minutes per date with a running cumulative total.

    Rows without a date are skipped. Dates are sorted as text, which
    orders ISO dates chronologically.
    """
    daily: Dict[str, float] = defaultdict(float)

    skipped = 0
    for row in rows:
        day = get_cell(row, "date").strip()
        if not day:
            skipped += 1
            continue
        daily[day] += parse_minutes(get_cell(row, "minutes"))

    if skipped:
        logger.debug(f"Skipped {skipped} rows without a date")

    result = []
    cumulative = 0.0
    for day in sorted(daily):
        cumulative += daily[day]
        result.append(
            {"date": day, "minutes": daily[day], "cumulative": cumulative}
        )

    return result


def format_minutes(minutes: float) -> str:
    """Format minutes without a trailing '.0' for whole numbers."""
    if float(minutes).is_integer():
        return str(int(minutes))
    return f"{minutes:g}"
