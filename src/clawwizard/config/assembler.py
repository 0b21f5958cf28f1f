"""Configuration assembly — merges answers, role template and integrations.

The Configuration is built once per run and never mutated; every renderer
reads from it and nothing else. Automation categories are resolved here,
once, so renderers never re-run the schedule heuristic.

Key class: ConfigurationAssembler.
Key function: assemble().
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from ..schedule.classify import resolve_category
from ..template.catalog import TemplateCatalog
from ..template.types import AutomationSpec, SkillEntry, Template
from .integrations import IntegrationSpec, expand_integrations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Answers:
    """Raw interview answers."""

    user_type: str
    goals: tuple[str, ...] = ()
    experience: str = ""
    tools: tuple[str, ...] = ()


@dataclass(frozen=True)
class UserProfile:
    type: str
    goals: tuple[str, ...] = ()
    experience: str = ""


@dataclass(frozen=True)
class WorkspaceInfo:
    name: str
    description: str
    skills: tuple[SkillEntry, ...] = ()
    automations: Mapping[str, AutomationSpec] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True)
class Configuration:
    """Everything the renderers need for one workspace."""

    user: UserProfile
    template: Template
    integrations: Mapping[str, IntegrationSpec]
    workspace: WorkspaceInfo
    created: str  # ISO 8601, UTC

    @property
    def skill_names(self) -> list[str]:
        return [name for name, _ in self.workspace.skills]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view, used by --test mode."""
        return {
            "user": {
                "type": self.user.type,
                "goals": list(self.user.goals),
                "experience": self.user.experience,
            },
            "template": self.template.to_dict(),
            "integrations": {k: v.to_dict() for k, v in self.integrations.items()},
            "workspace": {
                "name": self.workspace.name,
                "description": self.workspace.description,
                "automations": {
                    n: a.to_dict(include_category=True)
                    for n, a in self.workspace.automations.items()
                },
                "skills": self.skill_names,
            },
            "created": self.created,
        }


def format_created(moment: datetime) -> str:
    """UTC ISO timestamp with millisecond precision and a ``Z`` suffix.

    Naive datetimes are taken as local time.
    """
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _with_categories(template: Template) -> Template:
    automations = MappingProxyType(
        {
            name: dataclasses.replace(spec, category=resolve_category(spec))
            for name, spec in template.automations.items()
        }
    )
    return dataclasses.replace(template, automations=automations)


def assemble(
    answers: Answers,
    template: Template,
    integration_toggles: Iterable[str],
    created: datetime | None = None,
) -> Configuration:
    """Build the Configuration for one run.

    Pure when ``created`` is given; otherwise stamps the current UTC time.
    """
    if created is None:
        created = datetime.now(timezone.utc)

    resolved = _with_categories(template)
    user_type = answers.user_type
    config = Configuration(
        user=UserProfile(
            type=user_type,
            goals=tuple(answers.goals),
            experience=answers.experience,
        ),
        template=resolved,
        integrations=MappingProxyType(expand_integrations(integration_toggles)),
        workspace=WorkspaceInfo(
            name=f"{user_type}-ai-employee",
            description=f"AI employee setup for {user_type}",
            skills=resolved.skills,
            automations=resolved.automations,
        ),
        created=format_created(created),
    )
    logger.debug(
        "Assembled configuration: type=%s, automations=%d, skills=%d",
        user_type,
        len(resolved.automations),
        len(resolved.skills),
    )
    return config


class ConfigurationAssembler:
    """Looks up the role template, then assembles."""

    def __init__(self, catalog: TemplateCatalog) -> None:
        self.catalog = catalog

    def assemble(
        self,
        answers: Answers,
        integration_toggles: Iterable[str] | None = None,
        created: datetime | None = None,
    ) -> Configuration:
        """Raises TemplateNotFound if the catalog has no template for the role."""
        template = self.catalog.load(answers.user_type)
        toggles = answers.tools if integration_toggles is None else integration_toggles
        return assemble(answers, template, toggles, created)
