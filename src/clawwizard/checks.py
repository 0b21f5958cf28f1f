"""Environment checks run before the interview.

Both checks fail fast with a SystemCheckError carrying the fix the user
should apply. Nothing is retried.
"""

import logging
import shutil
import subprocess
import sys

from .errors import SystemCheckError

logger = logging.getLogger(__name__)

MIN_PYTHON = (3, 11)
INSTALL_HINT = "npm install -g openclaw@latest"


def check_python(version_info: tuple[int, ...] | None = None) -> None:
    """Require MIN_PYTHON or newer."""
    version = tuple(version_info or sys.version_info[:3])
    if version[:2] < MIN_PYTHON:
        found = ".".join(str(v) for v in version)
        required = ".".join(str(v) for v in MIN_PYTHON)
        raise SystemCheckError(f"Python {required}+ required, found {found}")


def check_openclaw(command: str = "openclaw") -> str:
    """Locate the OpenClaw CLI on PATH, falling back to ``npx``.

    Returns:
        How the runtime was found: the resolved path, or ``"npx <command>"``.
    """
    found = shutil.which(command)
    if found:
        logger.debug("Found %s at %s", command, found)
        return found

    npx = shutil.which("npx")
    if npx:
        try:
            result = subprocess.run(
                [npx, "--no-install", command, "--version"],
                capture_output=True,
                text=True,
                timeout=30,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("npx probe failed: %s", e)
        else:
            if result.returncode == 0:
                logger.debug("Found %s via npx: %s", command, result.stdout.strip())
                return f"npx {command}"

    raise SystemCheckError(
        f"OpenClaw not found. Please install OpenClaw first: {INSTALL_HINT}"
    )


def run_system_checks(command: str = "openclaw") -> None:
    print("Checking system requirements...")
    check_python()
    check_openclaw(command)
    print("System requirements met")
