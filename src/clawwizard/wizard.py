"""Interactive onboarding — interview, assemble, generate, summarize.

The interview uses plain ``input()`` prompts (injectable for tests). Invalid
answers fall back to the default.

Key function: run_wizard().
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from .checks import run_system_checks
from .config.assembler import Answers, Configuration, ConfigurationAssembler
from .config.integrations import KNOWN_TOOLS
from .errors import TemplateNotFound
from .pipeline import generate_workspace
from .render.skills import SKILLS_CONFIG_FILE, config_patch_command
from .settings import WizardSettings
from .template.catalog import TemplateCatalog

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

EXPERIENCE_LEVELS = ("beginner", "intermediate", "advanced")

_GOAL_SUGGESTIONS = {
    "founder": (
        "Track key business metrics",
        "Prepare investor updates",
        "Monitor competitors",
        "Manage inbox and calendar",
    ),
    "engineer": (
        "Speed up code reviews",
        "Stay on top of CI/CD failures",
        "Triage GitHub issues",
        "Reduce context switching",
    ),
}
_DEFAULT_GOALS = (
    "Save time on routine tasks",
    "Stay organized",
    "Get a daily briefing",
)

_TOOL_LABELS = {
    "gmail": "Gmail",
    "calendar": "Google Calendar",
    "github": "GitHub",
    "social": "Social media (LinkedIn, Twitter)",
}


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------


def _split(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _pick(token: str, options: tuple[str, ...] | list[str]) -> str | None:
    """Resolve a 1-based index or a literal option name."""
    if token.isdigit():
        idx = int(token) - 1
        return options[idx] if 0 <= idx < len(options) else None
    return token if token in options else None


def _prompt_choice(
    input_fn: InputFn, question: str, options: list[str], default: str
) -> str:
    print(question)
    for i, option in enumerate(options, 1):
        print(f"  {i}. {option}")
    raw = input_fn(f"Choice [{default}]: ").strip()
    if not raw:
        return default
    picked = _pick(raw, options)
    if picked is None:
        print(f"Unrecognized choice '{raw}', using {default}.")
        return default
    return picked


def _prompt_goals(input_fn: InputFn, user_type: str) -> tuple[str, ...]:
    suggestions = _GOAL_SUGGESTIONS.get(user_type, _DEFAULT_GOALS)
    print("What do you want your AI employee to help with?")
    for i, goal in enumerate(suggestions, 1):
        print(f"  {i}. {goal}")
    raw = input_fn("Goals (numbers or your own, comma-separated): ")
    goals: list[str] = []
    for token in _split(raw):
        goal = _pick(token, suggestions) if token.isdigit() else token
        if goal and goal not in goals:
            goals.append(goal)
    return tuple(goals)


def _prompt_tools(input_fn: InputFn) -> tuple[str, ...]:
    print("Which tools do you use?")
    for i, tool in enumerate(KNOWN_TOOLS, 1):
        print(f"  {i}. {_TOOL_LABELS[tool]} ({tool})")
    raw = input_fn("Tools (comma-separated, blank for none): ")
    tools: list[str] = []
    for token in _split(raw.lower()):
        tool = _pick(token, KNOWN_TOOLS) or token
        if tool not in tools:
            tools.append(tool)
    return tuple(tools)


def ask_questions(
    catalog: TemplateCatalog,
    preselected: str | None = None,
    input_fn: InputFn = input,
) -> Answers:
    """Run the interview and return the raw answers."""
    if preselected:
        user_type = preselected
    else:
        roles = catalog.roles()
        default = "founder" if "founder" in roles else roles[0]
        user_type = _prompt_choice(
            input_fn, "Which best describes you?", roles, default
        )

    goals = _prompt_goals(input_fn, user_type)
    experience = _prompt_choice(
        input_fn,
        "How experienced are you with AI assistants?",
        list(EXPERIENCE_LEVELS),
        "intermediate",
    )
    tools = _prompt_tools(input_fn)
    return Answers(user_type=user_type, goals=goals, experience=experience, tools=tools)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


def run_wizard(
    settings: WizardSettings,
    template: str | None = None,
    test_mode: bool = False,
    input_fn: InputFn = input,
    now: datetime | None = None,
) -> Configuration:
    """Checks → interview → assemble → generate (unless ``test_mode``).

    Raises:
        SystemCheckError: Environment checks failed (before any prompt).
        TemplateNotFound: No template for the chosen role (before any write).
    """
    print("🦞 OpenClaw Role-Based Wizard")
    print("Let's enhance your OpenClaw setup with role-specific templates!\n")

    if not settings.skip_checks:
        run_system_checks(settings.openclaw_command)

    extra_dirs = [settings.templates_dir] if settings.templates_dir else []
    catalog = TemplateCatalog(extra_dirs)
    if template and template not in catalog:
        raise TemplateNotFound(template, catalog.roles())

    answers = ask_questions(catalog, preselected=template, input_fn=input_fn)
    logger.debug("Interview answers: %s", answers)
    config = ConfigurationAssembler(catalog).assemble(answers)

    if test_mode:
        print("🧪 Test mode - configuration would be:")
        print(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
        return config

    print("Setting up your AI employee workspace...")
    root = generate_workspace(
        config,
        settings.workspace_dir,
        now=now,
        materialize_skills=settings.materialize_skills,
    )
    display_success(config, root)
    return config


def display_success(config: Configuration, workspace_root: Path) -> None:
    skills = ", ".join(config.skill_names) or "none"
    print("\n🎉 Success! Your AI employee is ready to work!")
    print("\n📋 What was set up:")
    print(f"   • Role Template: {config.template.name} ({config.user.type})")
    print(f"   • OpenClaw Skills Config Generated: {skills}")
    print(f"   • Workspace: {workspace_root}")
    print("   • Files Created: AGENTS.md, HEARTBEAT.md, README.md, morning-brief.md")
    print(f"   • Skills configuration saved to: {workspace_root / SKILLS_CONFIG_FILE}")
    print(f"   💡 To apply: {config_patch_command(config)}")

    print("\n🚀 Next steps:")
    print("   1. Start OpenClaw: openclaw gateway start")
    print(f"   2. Open workspace: cd {workspace_root}")
    print(f"   3. Check your setup: cat {workspace_root / 'morning-brief.md'}")
    print("\n💡 Need help? Check the documentation or join our Discord community.")
