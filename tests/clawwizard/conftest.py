"""Shared fixtures: small templates and frozen-clock configurations."""

from datetime import datetime, timezone

import pytest

from clawwizard.config.assembler import Answers, Configuration, assemble
from clawwizard.template.types import Template

CREATED = datetime(2026, 2, 20, 14, 30, 5, 123000, tzinfo=timezone.utc)
NOW = datetime(2026, 2, 21, 8, 0)


def _template_data() -> dict:
    return {
        "name": "Test Role",
        "description": "A role used in tests.",
        "automations": {
            "morning_brief": {
                "schedule": "8:00 AM daily",
                "description": "Daily briefing",
                "priority": "high",
                "includes": ["Metrics", "Calendar"],
            },
            "weekly_review": {
                "schedule": "Weekly Friday 4:00 PM",
                "description": "Review the week",
                "includes": ["Wins"],
            },
            "board_prep": {
                "schedule": "Monthly first Monday",
                "description": "Board deck outline",
            },
            "pr_watch": {
                "schedule": "On PR creation",
                "description": "Review new pull requests",
                "includes": ["Security"],
            },
        },
        "skills": ["email", "calendar"],
    }


@pytest.fixture
def template_data() -> dict:
    """Raw template mapping; tests mutate their own copy."""
    return _template_data()


@pytest.fixture
def make_template():
    def _make(**overrides) -> Template:
        data = _template_data()
        data.update(overrides)
        return Template.from_dict(data)

    return _make


@pytest.fixture
def make_config(make_template):
    def _make(
        user_type: str = "founder",
        goals: tuple[str, ...] = ("Raise a seed round",),
        tools: tuple[str, ...] = ("gmail", "github"),
        **template_overrides,
    ) -> Configuration:
        answers = Answers(
            user_type=user_type, goals=goals, experience="intermediate", tools=tools
        )
        return assemble(
            answers, make_template(**template_overrides), tools, created=CREATED
        )

    return _make


@pytest.fixture
def config(make_config) -> Configuration:
    return make_config()


@pytest.fixture
def now() -> datetime:
    return NOW
