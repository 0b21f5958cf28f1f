"""Bucket free-text automation schedules into daily/weekly/monthly/other.

Schedules are human phrases ("8:00 AM daily", "Weekly Friday 4:00 PM",
"On PR creation"), not a grammar. Classification is a substring heuristic:

  - "daily"               — lowercase only
  - "Weekly" / "weekly"
  - "Monthly" / "monthly"

checked in that order, first match wins. The asymmetric case handling is
legacy behaviour that existing templates depend on: "Daily standup" is
*not* daily. Templates that need a different bucket declare ``category``
explicitly; resolve_category() honours that before falling back here.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..template.types import AutomationSpec


class ScheduleCategory(str, enum.Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    OTHER = "other"


# (category, tokens) in priority order
_TOKENS: tuple[tuple[ScheduleCategory, tuple[str, ...]], ...] = (
    (ScheduleCategory.DAILY, ("daily",)),
    (ScheduleCategory.WEEKLY, ("Weekly", "weekly")),
    (ScheduleCategory.MONTHLY, ("Monthly", "monthly")),
)


def classify(schedule: str) -> ScheduleCategory:
    """Return the category for a schedule string (never raises)."""
    for category, tokens in _TOKENS:
        if any(token in schedule for token in tokens):
            return category
    return ScheduleCategory.OTHER


def resolve_category(spec: AutomationSpec) -> ScheduleCategory:
    """Explicit template category if set, else the substring heuristic."""
    if spec.category is not None:
        return spec.category
    return classify(spec.schedule)
