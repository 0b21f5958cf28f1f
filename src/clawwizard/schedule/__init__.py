"""Schedule categorization for template automations."""

from .classify import ScheduleCategory, classify, resolve_category

__all__ = ["ScheduleCategory", "classify", "resolve_category"]
