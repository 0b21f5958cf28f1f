"""Skill artifacts and the role example template.

  - openclaw-skills-config.json  — ``skills.entries`` block for openclaw.json
  - skills/<skill>/SKILL.md       — per-skill description with front matter
  - skills/<skill>/package.json   — manifest for the runtime's skill loader
  - templates/<type>-automation-template.json
"""

from __future__ import annotations

import json
from typing import Any

from ..config.assembler import Configuration
from ..template.types import SkillSpec
from ..utils import safe_name
from .document import Document, Heading, Page, Paragraph, to_json, to_yaml
from .markdown import DEFAULT_SKILL_DESCRIPTION

SKILLS_CONFIG_FILE = "openclaw-skills-config.json"

_USAGE_INSTRUCTIONS = """\
# How to Use This Template

1. Copy this template for new automations
2. Customize the triggers and actions for your needs
3. Test with small data sets first
4. Scale up once working properly

# OpenClaw Integration

This template is designed to work with OpenClaw's automation system.
Configure skills in ~/.openclaw/openclaw.json using the provided configuration.
"""


def skills_config(config: Configuration) -> dict[str, Any]:
    """``{"skills": {"entries": {name: {"enabled": true, ...overrides}}}}``."""
    entries = {
        name: {"enabled": True, **spec.to_dict()} for name, spec in config.workspace.skills
    }
    return {"skills": {"entries": entries}}


def config_patch_command(config: Configuration) -> str:
    """Shell command that applies the skills config to the runtime."""
    raw = json.dumps(skills_config(config), separators=(",", ":"))
    return f"openclaw config patch --raw '{raw}'"


def render_skills_config(config: Configuration) -> Document:
    return Document(SKILLS_CONFIG_FILE, to_json(skills_config(config)))


def _skill_description(spec: SkillSpec) -> str:
    return spec.description or DEFAULT_SKILL_DESCRIPTION


def render_skill_scaffolds(config: Configuration) -> list[Document]:
    """SKILL.md + package.json for each configured skill."""
    docs: list[Document] = []
    for name, spec in config.workspace.skills:
        directory = f"skills/{safe_name(name)}"
        description = _skill_description(spec)

        front_matter = to_yaml({"name": name, "description": description})
        page = Page().add(
            Heading(name, 1),
            Paragraph(description),
            Paragraph(
                f"Enabled for the {config.template.name} role. "
                f"Toggle it in `{SKILLS_CONFIG_FILE}`."
            ),
        )
        docs.append(
            Document(f"{directory}/SKILL.md", f"---\n{front_matter}---\n\n{page.render()}")
        )

        manifest = {
            "name": f"openclaw-skill-{safe_name(name).lower()}",
            "version": "1.0.0",
            "description": description,
            "main": "SKILL.md",
            "keywords": ["openclaw", "skill", name],
            "author": config.workspace.name,
            "license": "MIT",
        }
        docs.append(Document(f"{directory}/package.json", to_json(manifest)))
    return docs


def render_example_template(config: Configuration) -> Document:
    user_type = config.user.type
    data = {
        "name": f"{user_type}_automation_example",
        "description": f"Example automation workflow for {user_type}",
        "template": config.template.to_dict(),
        "usage_instructions": _USAGE_INSTRUCTIONS,
        "skills_needed": config.skill_names,
    }
    return Document(
        f"templates/{safe_name(user_type)}-automation-template.json", to_json(data)
    )
