"""Tests for render/skills.py — skills config, scaffolds, example template."""

import json

import yaml

from clawwizard.render.skills import (
    config_patch_command,
    render_example_template,
    render_skill_scaffolds,
    render_skills_config,
    skills_config,
)


class TestSkillsConfig:
    def test_list_form(self, config):
        assert skills_config(config) == {
            "skills": {"entries": {"email": {"enabled": True}, "calendar": {"enabled": True}}}
        }

    def test_mapping_overrides_merged(self, make_config):
        config = make_config(
            skills={
                "entries": {
                    "email": {"description": "Inbox", "apiKey": "env:KEY"},
                    "calendar": {"enabled": False},
                }
            }
        )
        entries = skills_config(config)["skills"]["entries"]
        assert entries["email"] == {
            "enabled": True,
            "description": "Inbox",
            "apiKey": "env:KEY",
        }
        assert entries["calendar"] == {"enabled": False}

    def test_same_names_for_both_shapes(self, make_config):
        from_list = make_config(skills=["email", "calendar"])
        from_map = make_config(skills={"entries": {"email": {}, "calendar": {}}})
        assert list(skills_config(from_list)["skills"]["entries"]) == list(
            skills_config(from_map)["skills"]["entries"]
        )

    def test_document_is_json(self, config):
        doc = render_skills_config(config)
        assert doc.path == "openclaw-skills-config.json"
        assert json.loads(doc.content) == skills_config(config)

    def test_patch_command(self, config):
        cmd = config_patch_command(config)
        assert cmd.startswith("openclaw config patch --raw '")
        raw = cmd[len("openclaw config patch --raw '") : -1]
        assert json.loads(raw) == skills_config(config)


class TestSkillScaffolds:
    def test_two_files_per_skill(self, config):
        paths = [d.path for d in render_skill_scaffolds(config)]
        assert paths == [
            "skills/email/SKILL.md",
            "skills/email/package.json",
            "skills/calendar/SKILL.md",
            "skills/calendar/package.json",
        ]

    def test_skill_md_front_matter(self, make_config):
        config = make_config(skills={"entries": {"email": {"description": "Inbox"}}})
        skill_md = render_skill_scaffolds(config)[0].content
        assert skill_md.startswith("---\n")
        front = skill_md.split("---\n")[1]
        assert yaml.safe_load(front) == {"name": "email", "description": "Inbox"}
        assert "# email" in skill_md

    def test_package_json_shape(self, config):
        manifest = json.loads(render_skill_scaffolds(config)[1].content)
        assert set(manifest) == {
            "name",
            "version",
            "description",
            "main",
            "keywords",
            "author",
            "license",
        }
        assert manifest["description"] == "Official OpenClaw skill"
        assert "email" in manifest["keywords"]

    def test_unsafe_skill_name_sanitized(self, make_config):
        config = make_config(skills=["../evil skill"])
        paths = [d.path for d in render_skill_scaffolds(config)]
        assert paths[0] == "skills/evil_skill/SKILL.md"

    def test_no_skills(self, make_config):
        assert render_skill_scaffolds(make_config(skills=[])) == []


class TestExampleTemplate:
    def test_named_by_user_type(self, make_config):
        doc = render_example_template(make_config(user_type="engineer"))
        assert doc.path == "templates/engineer-automation-template.json"

    def test_contents(self, config):
        data = json.loads(render_example_template(config).content)
        assert data["name"] == "founder_automation_example"
        assert data["description"] == "Example automation workflow for founder"
        assert data["template"]["name"] == "Test Role"
        assert data["skills_needed"] == ["email", "calendar"]
        assert "How to Use This Template" in data["usage_instructions"]
