"""Artifact rendering: Configuration → list of Documents.

render_workspace() is the single entry point; the order of the returned
list is fixed so repeated runs write files in the same sequence.
"""

from __future__ import annotations

from datetime import datetime

from ..config.assembler import Configuration
from .automations import render_automations, render_clawdbot_config
from .document import Document
from .markdown import render_agents, render_heartbeat, render_morning_brief, render_readme
from .skills import render_example_template, render_skill_scaffolds, render_skills_config

__all__ = ["Document", "render_workspace"]


def render_workspace(
    config: Configuration, now: datetime, materialize_skills: bool = True
) -> list[Document]:
    """Render every workspace artifact for ``config``.

    ``now`` dates the morning brief; nothing here reads the clock.
    """
    docs = [
        render_clawdbot_config(config),
        *render_automations(config),
        render_agents(config),
        render_heartbeat(config),
        render_readme(config),
        render_morning_brief(config, now),
        render_example_template(config),
        render_skills_config(config),
    ]
    if materialize_skills:
        docs.extend(render_skill_scaffolds(config))
    return docs
