"""Application entry point — CLI dispatcher.

Handles two execution modes:
  1. `clawwizard list-templates` — prints the available role templates.
  2. Default — configures logging, loads settings, and runs the interactive
     wizard (system checks, interview, workspace generation).

Per-run flags override settings.toml values.
"""

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path

from . import __version__


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clawwizard",
        description="Generate a role-based OpenClaw workspace.",
    )
    parser.add_argument("--template", help="Role template to use (skips the role question)")
    parser.add_argument("--workspace", help="Workspace directory (default: ~/clawd)")
    parser.add_argument(
        "--skip-checks", action="store_true", help="Skip Python/OpenClaw checks"
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Print the assembled configuration instead of writing files",
    )
    parser.add_argument(
        "--no-skills", action="store_true", help="Do not write skills/<name>/ scaffolds"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _list_templates() -> None:
    from .settings import load_settings
    from .template.catalog import TemplateCatalog

    settings = load_settings()
    extra_dirs = [settings.templates_dir] if settings.templates_dir else []
    catalog = TemplateCatalog(extra_dirs)
    for role in catalog.roles():
        try:
            name = catalog.load(role).name
        except ValueError as e:
            name = f"(invalid: {e})"
        print(f"{role:<12} {name}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "list-templates":
        _list_templates()
        return

    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )

    from .errors import WizardError
    from .settings import load_settings
    from .wizard import run_wizard

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}\n")
        print("Check your settings.toml configuration.")
        sys.exit(1)

    overrides: dict = {}
    if args.workspace:
        overrides["workspace_dir"] = Path(os.path.expanduser(args.workspace))
    if args.skip_checks:
        overrides["skip_checks"] = True
    if args.no_skills:
        overrides["materialize_skills"] = False
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    level = "DEBUG" if args.verbose else settings.log_level.upper()
    logging.getLogger("clawwizard").setLevel(level)
    logger = logging.getLogger(__name__)
    logger.debug("Settings: %s", settings)

    try:
        run_wizard(settings, template=args.template, test_mode=args.test)
    except (WizardError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        print("\nSetup cancelled.")
        sys.exit(1)


if __name__ == "__main__":
    main()
