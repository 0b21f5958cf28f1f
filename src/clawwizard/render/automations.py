"""YAML artifacts: config/clawdbot.yaml and automations/*.yaml.

Every workspace gets a morning-brief automation. The user type then
selects at most one extra definition:

  founder   → automations/investor-update.yaml
  engineer  → automations/code-review.yaml
  (other)   → nothing extra
"""

from __future__ import annotations

from typing import Any

from ..config.assembler import Configuration
from .document import Document, to_yaml

DEFAULT_BRIEF_SCHEDULE = "8:00 AM daily"


def render_clawdbot_config(config: Configuration) -> Document:
    data = {
        "workspace": {
            "name": config.workspace.name,
            "description": config.workspace.description,
            "created": config.created,
            "user_type": config.user.type,
        },
        "skills": [
            {"name": name, "enabled": spec.enabled, "auto_install": True}
            for name, spec in config.workspace.skills
        ],
        "integrations": {k: v.to_dict() for k, v in config.integrations.items()},
        "automations": {
            name: spec.to_dict() for name, spec in config.template.automations.items()
        },
        "workflows": list(config.template.workflows),
    }
    return Document("config/clawdbot.yaml", to_yaml(data))


def morning_brief_definition(config: Configuration) -> dict[str, Any]:
    brief = config.template.automations.get("morning_brief")
    return {
        "name": "Morning Intelligence Brief",
        "schedule": brief.schedule if brief else DEFAULT_BRIEF_SCHEDULE,
        "description": "Daily briefing with relevant updates and priorities",
        "actions": [
            {
                "type": "collect_data",
                "sources": list(brief.includes or ()) if brief else [],
            },
            {
                "type": "generate_summary",
                "format": "markdown",
                "output": "morning-brief.md",
            },
            {
                "type": "notify",
                "method": "console",
                "message": "Your morning brief is ready!",
            },
        ],
    }


def _investor_update() -> dict[str, Any]:
    return {
        "name": "Weekly Investor Update Prep",
        "schedule": "Weekly Friday 4:00 PM",
        "description": "Prepare weekly investor update with key metrics and highlights",
        "actions": [
            {
                "type": "collect_metrics",
                "sources": ["revenue", "user_growth", "team_updates"],
            },
            {
                "type": "generate_report",
                "template": "investor_update",
                "output": "weekly-investor-update.md",
            },
        ],
    }


def _code_review() -> dict[str, Any]:
    return {
        "name": "Automated Code Review Assistant",
        "schedule": "On PR creation",
        "description": "Assist with code reviews and quality checks",
        "actions": [
            {
                "type": "analyze_code",
                "checks": ["security", "performance", "style", "tests"],
            },
            {
                "type": "generate_feedback",
                "format": "github_comment",
                "output": "pr-review-comments.md",
            },
        ],
    }


# user type → (file stem, definition builder)
ROLE_AUTOMATIONS = {
    "founder": ("investor-update", _investor_update),
    "engineer": ("code-review", _code_review),
}


def render_automations(config: Configuration) -> list[Document]:
    """Morning brief plus the role-specific automation, if any."""
    docs = [
        Document(
            "automations/morning-brief.yaml", to_yaml(morning_brief_definition(config))
        )
    ]
    role = ROLE_AUTOMATIONS.get(config.user.type)
    if role is not None:
        stem, build = role
        docs.append(Document(f"automations/{stem}.yaml", to_yaml(build())))
    return docs
