"""Data models for health and workout summaries."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


# a workout row maps lower-cased column names to raw cell text
WorkoutRow = Dict[str, str]

# parsed JSON arrays and CSV row lists arrive as either of these
SEQUENCE_TYPES = (list, tuple)


@dataclass(frozen=True)
class EntryList:
    """Health document whose top-level value is the entry list itself."""

    entries: List[Any] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class KeyedEntryList:
    """Health document object whose first list-valued property holds the entries."""

    key: str
    entries: List[Any] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class UnrecognizedShape:
    """Health document with no entry list (scalar, null, or object without lists)."""

    kind: str

    @property
    def count(self) -> int:
        return 0


HealthShape = Union[EntryList, KeyedEntryList, UnrecognizedShape]


def json_type_name(value: Any) -> str:
    """Name the JSON type of a parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, SEQUENCE_TYPES):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


@dataclass
class WorkoutSummary:
    """Workout totals measured against an optional weekly goal."""

    workouts: int
    total_minutes: float
    weekly_goal: Optional[float] = None

    @property
    def has_goal(self) -> bool:
        """Whether the weekly goal can be used as a divisor."""
        return (
            self.weekly_goal is not None
            and math.isfinite(self.weekly_goal)
            and self.weekly_goal > 0
        )

    @property
    def goal_progress_percent(self) -> Optional[int]:
        """Progress towards the weekly goal, rounded half up to a whole percent."""
        if not self.has_goal:
            return None
        return math.floor(self.total_minutes * 100 / self.weekly_goal + 0.5)

    @property
    def goal_reached(self) -> bool:
        return self.has_goal and self.total_minutes >= self.weekly_goal

    @property
    def remaining_minutes(self) -> Optional[float]:
        """Minutes still needed to reach the goal (never negative)."""
        if not self.has_goal:
            return None
        return max(0.0, self.weekly_goal - self.total_minutes)
