"""Markdown documents read by the OpenClaw runtime and by the user.

  - README.md         — setup summary and getting-started steps
  - AGENTS.md         — operating instructions, loaded every session
  - HEARTBEAT.md      — periodic tasks grouped by schedule category
  - morning-brief.md  — a first brief, dated by the ``now`` passed in

Every function is pure: Configuration (+ now) in, Document out.
"""

from __future__ import annotations

import re
from datetime import datetime

from .. import __version__
from ..config.assembler import Configuration
from ..schedule.classify import ScheduleCategory, resolve_category
from ..template.types import AutomationSpec
from .document import (
    BulletList,
    Document,
    Heading,
    NumberedList,
    Page,
    Paragraph,
    Rule,
    Tight,
)

DEFAULT_SKILL_DESCRIPTION = "Official OpenClaw skill"
NO_SCHEDULE = "Not scheduled"

_OPERATING_PRINCIPLES = (
    "**Proactive Monitoring**: Check metrics and systems before issues arise",
    "**Data-Driven Insights**: Always provide context and trends, not just numbers",
    "**Actionable Recommendations**: Every brief should include specific next steps",
    "**Time-Conscious**: Prioritize high-impact activities that save the most time",
    "**Communication**: Keep updates clear, concise, and decision-focused",
)

_ALERT_THRESHOLDS = (
    "Metrics trending negative >2 days",
    "Team blockers that could impact deadlines",
    "Competitive moves requiring immediate response",
    "Budget/runway concerns requiring founder attention",
)

# (category, section title, action verb, fallback action)
_HEARTBEAT_SECTIONS = (
    (
        ScheduleCategory.DAILY,
        "🔄 Daily Automation Tasks",
        "Check and report on",
        "Execute automation workflow",
    ),
    (
        ScheduleCategory.WEEKLY,
        "📊 Weekly Tasks",
        "Analyze and summarize",
        "Execute weekly workflow",
    ),
    (
        ScheduleCategory.MONTHLY,
        "📅 Monthly/Periodic Tasks",
        "Deep analysis of",
        "Execute periodic workflow",
    ),
)

_ROLE_METRICS = {
    "founder": ("Revenue tracking", "User growth", "Team updates"),
    "engineer": ("PR reviews pending", "GitHub notifications", "CI/CD status"),
}
_DEFAULT_METRICS = ("Daily goals", "Important updates")


def title_case(name: str) -> str:
    """``morning_brief`` → ``Morning Brief``."""
    return re.sub(r"\b\w", lambda m: m.group().upper(), name.replace("_", " "))


def format_date(moment: datetime) -> str:
    return f"{moment.month}/{moment.day}/{moment.year}"


def _created_date(config: Configuration) -> str:
    return format_date(datetime.fromisoformat(config.created))


def _integration_list(config: Configuration, empty: str) -> str:
    return ", ".join(config.integrations) or empty


# ---------------------------------------------------------------------------
# README.md
# ---------------------------------------------------------------------------


def render_readme(config: Configuration) -> Document:
    page = Page()
    page.add(
        Heading(config.workspace.name, 1),
        Paragraph(
            f"Your AI Employee workspace, configured for {config.user.type} workflows."
        ),
        Heading("🎯 Setup Summary"),
        BulletList(
            (
                f"**User Type:** {config.user.type}",
                f"**Created:** {_created_date(config)}",
                f"**Skills Installed:** {', '.join(config.skill_names) or 'None'}",
                f"**Integrations:** {_integration_list(config, 'None configured')}",
            )
        ),
        Heading("🚀 Getting Started"),
        NumberedList(
            (
                "**Start OpenClaw:** `openclaw gateway start`",
                "**Check your morning brief:** `cat morning-brief.md`",
                "**View automations:** `ls automations/`",
                "**Customize workflows:** Edit files in `workflows/`",
                "**Enable skills:** merge `openclaw-skills-config.json` into "
                "`~/.openclaw/openclaw.json`",
            )
        ),
        Heading("📋 Automations"),
    )

    automations = config.template.automations
    if not automations:
        page.add(Paragraph("_No automations configured._"))
    for name, spec in automations.items():
        includes = ", ".join(spec.includes) if spec.includes else "Custom workflow"
        page.add(
            Tight(
                (
                    Heading(name, 3),
                    BulletList(
                        (
                            f"**Schedule:** {spec.schedule or NO_SCHEDULE}",
                            f"**Includes:** {includes}",
                        )
                    ),
                )
            )
        )

    page.add(
        Heading("🔧 Configuration"),
        Paragraph(
            "All configuration files are in the `config/` directory. "
            "Main configuration is in `config/clawdbot.yaml`."
        ),
        Heading("📊 Goals Tracking"),
        Tight(
            (
                Paragraph("Your selected goals:"),
                BulletList(config.user.goals or ("General automation",)),
            )
        ),
        Heading("📞 Support"),
        BulletList(
            (
                "Documentation: [docs/](./docs/)",
                "Logs: [logs/](./logs/)",
                "Community: [Discord](https://discord.gg/clawd)",
            )
        ),
        Rule(),
        Paragraph(f"*Generated by ClawWizard v{__version__}*"),
    )
    return page.to_document("README.md")


# ---------------------------------------------------------------------------
# AGENTS.md
# ---------------------------------------------------------------------------


def _automation_block(name: str, spec: AutomationSpec) -> Tight:
    return Tight(
        (
            Heading(title_case(name), 3),
            BulletList(
                (
                    f"**Schedule:** {spec.schedule or NO_SCHEDULE}",
                    f"**Priority:** {spec.effective_priority}",
                    f"**Description:** {spec.description or 'Automated workflow'}",
                )
            ),
            BulletList(spec.includes or (), indent=1),
        )
    )


def render_agents(config: Configuration) -> Document:
    template = config.template
    page = Page()
    page.add(Heading(f"AGENTS.md - {template.name} Operating Instructions", 1))
    if template.description:
        page.add(Paragraph(template.description))
    page.add(
        Heading(f"🎯 Your Role: {template.name}"),
        Paragraph(
            f"You are an AI assistant specialized for {config.user.type} workflows. "
            "Your primary focus areas:"
        ),
    )
    for name, spec in template.automations.items():
        page.add(_automation_block(name, spec))

    if template.demo_scenarios:
        page.add(Heading("💡 Demo Scenarios"))
        for scenario in template.demo_scenarios:
            page.add(
                Tight(
                    (
                        Heading(scenario.name, 3),
                        Paragraph(scenario.description),
                        Paragraph(f"**Time saved:** {scenario.time_saved}"),
                    )
                )
            )

    metrics = template.impact_metrics
    if metrics is not None:
        page.add(
            Heading("⚡ Impact Metrics"),
            Tight(
                (
                    Paragraph("**Expected Time Savings:**"),
                    BulletList(
                        (
                            f"Daily: {metrics.daily_time_saved}",
                            f"Weekly: {metrics.weekly_time_saved}",
                            f"Monthly: {metrics.monthly_time_saved}",
                        )
                    ),
                )
            ),
        )
        if metrics.primary_benefits:
            page.add(
                Tight(
                    (
                        Paragraph("**Primary Benefits:**"),
                        BulletList(metrics.primary_benefits),
                    )
                )
            )

    page.add(
        Heading("🛠️ Available Skills"),
        Tight(
            (
                Paragraph("You have access to these OpenClaw skills:"),
                BulletList(
                    tuple(
                        f"**{name}**: {spec.description or DEFAULT_SKILL_DESCRIPTION}"
                        for name, spec in config.workspace.skills
                    )
                ),
            )
        ),
        Heading("📋 Daily Operating Principles"),
        NumberedList(_OPERATING_PRINCIPLES),
        Heading("🚨 Alert Thresholds"),
        Tight(
            (Paragraph("Be proactive about flagging:"), BulletList(_ALERT_THRESHOLDS))
        ),
        Rule(),
        Paragraph(
            "*This file is loaded every OpenClaw session. "
            "Update it as your needs evolve.*"
        ),
    )
    return page.to_document("AGENTS.md")


# ---------------------------------------------------------------------------
# HEARTBEAT.md
# ---------------------------------------------------------------------------


def render_heartbeat(config: Configuration) -> Document:
    template = config.template
    page = Page()
    page.add(
        Heading(f"HEARTBEAT.md - {template.name} Automation", 1),
        Paragraph(f"Automated periodic tasks for {config.user.type} workflows."),
    )

    for category, title, verb, fallback in _HEARTBEAT_SECTIONS:
        page.add(Heading(title))
        matching = [
            (name, spec)
            for name, spec in template.automations.items()
            if resolve_category(spec) is category
        ]
        if not matching:
            page.add(Paragraph(f"_No {category.value} tasks scheduled._"))
        for name, spec in matching:
            actions = (
                tuple(f"{verb}: {item}" for item in spec.includes)
                if spec.includes
                else (fallback,)
            )
            page.add(
                Tight(
                    (
                        Heading(title_case(name), 3),
                        BulletList(
                            (
                                f"**When:** {spec.schedule}",
                                f"**Priority:** {spec.effective_priority}",
                                f"**What:** {spec.description or 'Automated workflow'}",
                                "**Actions:**",
                            )
                        ),
                        BulletList(actions, indent=1),
                    )
                )
            )

    page.add(
        Heading("⚡ Proactive Monitoring"),
        Tight(
            (
                Paragraph("Between scheduled tasks, monitor for:"),
                BulletList(
                    (
                        "Critical metrics falling outside normal ranges",
                        "Team blockers that need immediate escalation",
                        "Competitive intelligence requiring rapid response",
                        "Opportunities for strategic advantage",
                    )
                ),
            )
        ),
        Heading("🎯 Success Metrics"),
        Tight(
            (
                Paragraph("Track automation effectiveness:"),
                BulletList(
                    (
                        "Time saved per task category",
                        "Issues caught proactively vs. reactively",
                        "Decision speed improvement",
                        f"Overall {config.user.type} productivity gains",
                    )
                ),
            )
        ),
        Rule(),
        Paragraph(
            "*Keep this file focused and actionable. "
            "OpenClaw reads this for automated tasks.*"
        ),
    )
    return page.to_document("HEARTBEAT.md")


# ---------------------------------------------------------------------------
# morning-brief.md
# ---------------------------------------------------------------------------


def render_morning_brief(config: Configuration, now: datetime) -> Document:
    pending = _integration_list(config, "none")
    metrics = _ROLE_METRICS.get(config.user.type, _DEFAULT_METRICS)
    goals = tuple(f"Work on: {goal}" for goal in config.user.goals) or (
        "General productivity tasks",
    )

    page = Page()
    page.add(
        Heading(f"Morning Brief - {format_date(now)}", 1),
        Paragraph("*Your AI employee has prepared this briefing*"),
        Heading("🎯 Today's Priorities"),
        BulletList(goals),
        Heading("📅 Schedule Overview"),
        Paragraph("*Calendar integration will populate this section*"),
        Heading("📊 Key Metrics"),
        BulletList(tuple(f"{m}: *Setup pending*" for m in metrics)),
        Heading("🔔 Notifications"),
        BulletList(
            (
                "✅ AI employee workspace configured",
                f"⏳ Integrations pending: {pending}",
                f"📋 Automations ready: {len(config.template.automations)} workflows",
            )
        ),
        Heading("💡 Suggestions"),
        NumberedList(
            (
                "Review and customize your automations in `automations/`",
                f"Set up integrations for: {pending}",
                "Check back tomorrow for your first real brief!",
            )
        ),
        Rule(),
        Paragraph("*This briefing will improve as your integrations are configured*"),
    )
    return page.to_document("morning-brief.md")
