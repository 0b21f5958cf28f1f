"""Data models for role templates.

A role template is a YAML mapping with keys ``name``, ``description``,
``automations``, ``skills``, ``demo_scenarios``, ``impact_metrics`` and
``workflows``. Everything but ``name`` is optional.

``skills`` arrives in one of three shapes and is normalized here, at parse
time, into an ordered tuple of (name, SkillSpec) pairs:

  - ["email", "calendar"]
  - {entries: {email: {enabled: true, ...}}}
  - {email: {...}, calendar: null}

Renderers only ever see the normalized form.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..schedule.classify import ScheduleCategory

DEFAULT_PRIORITY = "medium"


def _text(data: dict[str, Any], key: str) -> str:
    """String value of an optional key; a YAML null reads as missing."""
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass(frozen=True)
class AutomationSpec:
    """A named, scheduled unit of work described by a template."""

    schedule: str
    description: str | None = None
    priority: str | None = None  # None renders as "medium"
    includes: tuple[str, ...] | None = None
    category: ScheduleCategory | None = None  # explicit override of classify()

    @property
    def effective_priority(self) -> str:
        return self.priority or DEFAULT_PRIORITY

    def to_dict(self, include_category: bool = False) -> dict[str, Any]:
        """Template-shaped dict; only fields the template actually set."""
        d: dict[str, Any] = {"schedule": self.schedule}
        if self.description is not None:
            d["description"] = self.description
        if self.priority is not None:
            d["priority"] = self.priority
        if self.includes is not None:
            d["includes"] = list(self.includes)
        if include_category and self.category is not None:
            d["category"] = self.category.value
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AutomationSpec:
        includes = data.get("includes")
        category = data.get("category")
        return cls(
            schedule=_text(data, "schedule"),
            description=data.get("description"),
            priority=data.get("priority"),
            includes=tuple(str(i) for i in includes) if includes is not None else None,
            category=ScheduleCategory(category) if category else None,
        )


@dataclass(frozen=True)
class SkillSpec:
    """Per-skill settings; unknown keys pass through to the runtime config."""

    enabled: bool = True
    description: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"enabled": self.enabled}
        if self.description is not None:
            d["description"] = self.description
        d.update(self.extra)
        return d

    @classmethod
    def from_value(cls, value: Any) -> SkillSpec:
        """Build from a mapping entry: a dict, a bare bool, or null."""
        if value is None:
            return cls()
        if isinstance(value, bool):
            return cls(enabled=value)
        if not isinstance(value, dict):
            raise ValueError(f"Skill spec must be a mapping, got {value!r}")
        extra = {k: v for k, v in value.items() if k not in ("enabled", "description")}
        return cls(
            enabled=bool(value.get("enabled", True)),
            description=value.get("description"),
            extra=extra,
        )


SkillEntry = tuple[str, SkillSpec]


def normalize_skills(raw: Any) -> tuple[tuple[SkillEntry, ...], str]:
    """Normalize a template's ``skills`` value.

    Returns (entries, shape) where shape is "list" or "mapping".
    """
    if raw is None:
        return (), "list"
    if isinstance(raw, dict):
        entries = raw.get("entries")
        mapping = entries if isinstance(entries, dict) else raw
        return (
            tuple((str(name), SkillSpec.from_value(v)) for name, v in mapping.items()),
            "mapping",
        )
    if isinstance(raw, (list, tuple)):
        return tuple((str(name), SkillSpec()) for name in raw), "list"
    raise ValueError(f"'skills' must be a list or a mapping, got {type(raw).__name__}")


@dataclass(frozen=True)
class DemoScenario:
    name: str
    description: str = ""
    time_saved: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "time_saved": self.time_saved,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DemoScenario:
        return cls(
            name=_text(data, "name"),
            description=_text(data, "description"),
            time_saved=_text(data, "time_saved"),
        )


@dataclass(frozen=True)
class ImpactMetrics:
    daily_time_saved: str = ""
    weekly_time_saved: str = ""
    monthly_time_saved: str = ""
    primary_benefits: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "daily_time_saved": self.daily_time_saved,
            "weekly_time_saved": self.weekly_time_saved,
            "monthly_time_saved": self.monthly_time_saved,
            "primary_benefits": list(self.primary_benefits),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ImpactMetrics:
        return cls(
            daily_time_saved=_text(data, "daily_time_saved"),
            weekly_time_saved=_text(data, "weekly_time_saved"),
            monthly_time_saved=_text(data, "monthly_time_saved"),
            primary_benefits=tuple(str(b) for b in data.get("primary_benefits") or ()),
        )


@dataclass(frozen=True)
class Template:
    """A role-specific bundle of automations, skills and descriptive content."""

    name: str
    description: str = ""
    automations: Mapping[str, AutomationSpec] = field(default_factory=dict)
    skills: tuple[SkillEntry, ...] = ()
    skills_shape: str = "list"  # shape the template was written in
    demo_scenarios: tuple[DemoScenario, ...] = ()
    impact_metrics: ImpactMetrics | None = None
    workflows: tuple[Any, ...] = ()  # mappings or bare workflow names

    @property
    def skill_names(self) -> list[str]:
        return [name for name, _ in self.skills]

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to template shape (skills in their original shape)."""
        if self.skills_shape == "mapping":
            skills: Any = {"entries": {n: s.to_dict() for n, s in self.skills}}
        else:
            skills = self.skill_names
        d: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "automations": {n: a.to_dict() for n, a in self.automations.items()},
            "skills": skills,
        }
        if self.demo_scenarios:
            d["demo_scenarios"] = [s.to_dict() for s in self.demo_scenarios]
        if self.impact_metrics is not None:
            d["impact_metrics"] = self.impact_metrics.to_dict()
        if self.workflows:
            d["workflows"] = list(self.workflows)
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Template:
        if not data.get("name"):
            raise ValueError("Template must have a 'name' field.")
        automations_raw = data.get("automations") or {}
        if not isinstance(automations_raw, dict):
            raise ValueError("'automations' must be a mapping of name to spec.")
        skills, shape = normalize_skills(data.get("skills"))
        metrics = data.get("impact_metrics")
        return cls(
            name=str(data["name"]),
            description=_text(data, "description"),
            automations={
                str(n): AutomationSpec.from_dict(a or {})
                for n, a in automations_raw.items()
            },
            skills=skills,
            skills_shape=shape,
            demo_scenarios=tuple(
                DemoScenario.from_dict(s) for s in data.get("demo_scenarios") or ()
            ),
            impact_metrics=ImpactMetrics.from_dict(metrics) if metrics else None,
            workflows=tuple(
                dict(w) if isinstance(w, dict) else w
                for w in data.get("workflows") or ()
            ),
        )
