"""Shared utilities: config directory resolution and safe path names.

Key functions: clawwizard_dir(), safe_name().
"""

import os
import re
from pathlib import Path


def clawwizard_dir() -> Path:
    """Return the wizard config directory.

    ``$CLAWWIZARD_DIR`` wins; otherwise ``~/.clawwizard``.
    """
    raw = os.environ.get("CLAWWIZARD_DIR", "")
    if raw:
        return Path(os.path.expanduser(raw))
    return Path.home() / ".clawwizard"


def safe_name(name: str, fallback: str = "unnamed") -> str:
    """Reduce a free-form name to a single safe path component."""
    cleaned = re.sub(r"[^\w\-.]", "_", name).strip("._")
    cleaned = re.sub(r"_+", "_", cleaned)
    cleaned = cleaned[:100]
    return cleaned or fallback
