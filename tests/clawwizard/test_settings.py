"""Tests for settings.py — WizardSettings and load_settings."""

from pathlib import Path

import pytest

from clawwizard.settings import WizardSettings, load_settings


class TestWizardSettings:
    def test_defaults(self, tmp_path: Path):
        s = WizardSettings(config_dir=tmp_path)
        assert s.workspace_dir == Path.home() / "clawd"
        assert s.openclaw_command == "openclaw"
        assert s.skip_checks is False
        assert s.materialize_skills is True
        assert s.templates_dir is None
        assert s.settings_file == tmp_path / "settings.toml"


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        s = load_settings(config_dir=tmp_path)
        assert s.config_dir == tmp_path
        assert s.workspace_dir == Path.home() / "clawd"

    def test_reads_toml(self, tmp_path: Path):
        (tmp_path / "settings.toml").write_text(
            'workspace_dir = "/srv/clawd"\n'
            'openclaw_command = "claw"\n'
            "skip_checks = true\n"
            "materialize_skills = false\n"
            f'templates_dir = "{tmp_path / "roles"}"\n'
            'log_level = "debug"\n'
        )
        s = load_settings(config_dir=tmp_path)
        assert s.workspace_dir == Path("/srv/clawd")
        assert s.openclaw_command == "claw"
        assert s.skip_checks is True
        assert s.materialize_skills is False
        assert s.templates_dir == tmp_path / "roles"
        assert s.log_level == "debug"

    def test_expands_home(self, tmp_path: Path):
        (tmp_path / "settings.toml").write_text('workspace_dir = "~/my-clawd"\n')
        s = load_settings(config_dir=tmp_path)
        assert s.workspace_dir == Path.home() / "my-clawd"

    def test_wrong_bool_type(self, tmp_path: Path):
        (tmp_path / "settings.toml").write_text('skip_checks = "yes"\n')
        with pytest.raises(ValueError, match="skip_checks"):
            load_settings(config_dir=tmp_path)

    def test_empty_string(self, tmp_path: Path):
        (tmp_path / "settings.toml").write_text('openclaw_command = ""\n')
        with pytest.raises(ValueError, match="openclaw_command"):
            load_settings(config_dir=tmp_path)

    def test_bad_log_level(self, tmp_path: Path):
        (tmp_path / "settings.toml").write_text('log_level = "LOUD"\n')
        with pytest.raises(ValueError, match="log_level"):
            load_settings(config_dir=tmp_path)

    def test_env_workspace_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        (tmp_path / "settings.toml").write_text('workspace_dir = "/from/file"\n')
        monkeypatch.setenv("CLAWWIZARD_WORKSPACE", "/from/env")
        assert load_settings(config_dir=tmp_path).workspace_dir == Path("/from/env")

    def test_dotenv_in_config_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.delenv("CLAWWIZARD_WORKSPACE", raising=False)
        monkeypatch.chdir(tmp_path)
        config_dir = tmp_path / "cfg"
        config_dir.mkdir()
        (config_dir / ".env").write_text("CLAWWIZARD_WORKSPACE=/from/dotenv\n")
        try:
            s = load_settings(config_dir=config_dir)
            assert s.workspace_dir == Path("/from/dotenv")
        finally:
            monkeypatch.delenv("CLAWWIZARD_WORKSPACE", raising=False)

    def test_default_config_dir_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("CLAWWIZARD_DIR", str(tmp_path))
        assert load_settings().config_dir == tmp_path
