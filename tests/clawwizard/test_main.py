"""Tests for main.main() — CLI flag handling and error exits."""

from pathlib import Path
from unittest.mock import patch

import pytest

from clawwizard.errors import TemplateNotFound
from clawwizard.main import main


class TestMain:
    def test_flags_override_settings(self, tmp_path: Path):
        with patch("clawwizard.wizard.run_wizard") as run:
            main(
                [
                    "--template",
                    "engineer",
                    "--workspace",
                    str(tmp_path / "ws"),
                    "--skip-checks",
                    "--no-skills",
                    "--test",
                ]
            )
        settings = run.call_args.args[0]
        assert settings.workspace_dir == tmp_path / "ws"
        assert settings.skip_checks is True
        assert settings.materialize_skills is False
        assert run.call_args.kwargs == {"template": "engineer", "test_mode": True}

    def test_wizard_error_exits(self, capsys: pytest.CaptureFixture[str]):
        with (
            patch(
                "clawwizard.wizard.run_wizard",
                side_effect=TemplateNotFound("astronaut", ["founder"]),
            ),
            pytest.raises(SystemExit) as exc_info,
        ):
            main(["--template", "astronaut"])
        assert exc_info.value.code == 1
        assert "Error: No template found for role 'astronaut'" in capsys.readouterr().out

    def test_cancelled(self, capsys: pytest.CaptureFixture[str]):
        with (
            patch("clawwizard.wizard.run_wizard", side_effect=KeyboardInterrupt),
            pytest.raises(SystemExit),
        ):
            main([])
        assert "Setup cancelled." in capsys.readouterr().out

    def test_bad_settings_exit(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
    ):
        monkeypatch.setenv("CLAWWIZARD_DIR", str(tmp_path))
        (tmp_path / "settings.toml").write_text("skip_checks = 3\n")
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "settings.toml" in capsys.readouterr().out

    def test_list_templates(self, capsys: pytest.CaptureFixture[str]):
        main(["list-templates"])
        out = capsys.readouterr().out
        assert "founder" in out
        assert "Software Engineer" in out

    def test_invalid_template_file_exits(self, capsys: pytest.CaptureFixture[str]):
        with (
            patch(
                "clawwizard.wizard.run_wizard",
                side_effect=ValueError("Invalid template /x/broken.yaml: missing 'name'"),
            ),
            pytest.raises(SystemExit) as exc_info,
        ):
            main(["--template", "broken"])
        assert exc_info.value.code == 1
        assert "Error: Invalid template" in capsys.readouterr().out
