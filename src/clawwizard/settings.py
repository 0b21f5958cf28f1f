"""Wizard settings — reads settings.toml + .env to produce WizardSettings.

Every key is optional: a fresh machine with no config dir runs on defaults.
Per-run CLI flags are applied on top by main.py via dataclasses.replace().

Key entities:
  - WizardSettings: frozen dataclass with all resolved settings.
  - load_settings(): parse .env + settings.toml → WizardSettings.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .utils import clawwizard_dir

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# WizardSettings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WizardSettings:
    """Resolved configuration for one wizard run.

    All path attributes are pre-resolved; no further env lookups needed.
    """

    config_dir: Path = field(default_factory=clawwizard_dir)

    # Target workspace consumed by the OpenClaw runtime
    workspace_dir: Path = field(default_factory=lambda: Path.home() / "clawd")

    # Runtime checks
    openclaw_command: str = "openclaw"
    skip_checks: bool = False

    # Generation
    materialize_skills: bool = True
    templates_dir: Path | None = None  # extra role templates, searched first

    log_level: str = "INFO"

    @property
    def settings_file(self) -> Path:
        return self.config_dir / "settings.toml"


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------

_BOOL_KEYS = ("skip_checks", "materialize_skills")
_STR_KEYS = ("openclaw_command", "log_level")
_PATH_KEYS = ("workspace_dir", "templates_dir")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_settings(config_dir: Path | None = None) -> WizardSettings:
    """Read .env + settings.toml and return WizardSettings.

    Args:
        config_dir: Override for the base config directory.
                    Defaults to ``clawwizard_dir()``.

    Raises:
        ValueError: If settings.toml holds a key with the wrong type.
    """
    if config_dir is None:
        config_dir = clawwizard_dir()

    # Load .env files (local cwd first, then config_dir)
    local_env = Path(".env")
    global_env = config_dir / ".env"
    if local_env.is_file():
        load_dotenv(local_env)
    if global_env.is_file():
        load_dotenv(global_env)

    raw: dict = {}
    toml_path = config_dir / "settings.toml"
    if toml_path.is_file():
        with open(toml_path, "rb") as f:
            raw = tomllib.load(f)
        logger.debug("Loaded settings from %s", toml_path)
    else:
        logger.debug("No settings file at %s, using defaults", toml_path)

    kwargs: dict = {"config_dir": config_dir}

    for key in _BOOL_KEYS:
        if key in raw:
            if not isinstance(raw[key], bool):
                raise ValueError(f"settings.toml: '{key}' must be true or false.")
            kwargs[key] = raw[key]

    for key in _STR_KEYS:
        if key in raw:
            if not isinstance(raw[key], str) or not raw[key]:
                raise ValueError(f"settings.toml: '{key}' must be a non-empty string.")
            kwargs[key] = raw[key]

    for key in _PATH_KEYS:
        if key in raw:
            if not isinstance(raw[key], str) or not raw[key]:
                raise ValueError(f"settings.toml: '{key}' must be a path string.")
            kwargs[key] = Path(os.path.expanduser(raw[key]))

    if kwargs.get("log_level", "INFO").upper() not in _LOG_LEVELS:
        raise ValueError(f"settings.toml: unknown log_level '{kwargs['log_level']}'.")

    # Env var beats the file for the one setting users change per run
    env_workspace = os.getenv("CLAWWIZARD_WORKSPACE", "")
    if env_workspace:
        kwargs["workspace_dir"] = Path(os.path.expanduser(env_workspace))

    return WizardSettings(**kwargs)
