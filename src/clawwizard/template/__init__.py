"""Role templates: data model and catalog."""

from .catalog import TemplateCatalog
from .types import (
    AutomationSpec,
    DemoScenario,
    ImpactMetrics,
    SkillEntry,
    SkillSpec,
    Template,
    normalize_skills,
)

__all__ = [
    "AutomationSpec",
    "DemoScenario",
    "ImpactMetrics",
    "SkillEntry",
    "SkillSpec",
    "Template",
    "TemplateCatalog",
    "normalize_skills",
]
