"""Render + write in one call.

Key function: generate_workspace().
"""

import logging
from datetime import datetime
from pathlib import Path

from .config.assembler import Configuration
from .render import render_workspace
from .workspace.writer import WorkspaceWriter

logger = logging.getLogger(__name__)


def generate_workspace(
    config: Configuration,
    workspace_root: Path,
    now: datetime | None = None,
    materialize_skills: bool = True,
) -> Path:
    """Render every artifact for ``config`` and write it under ``workspace_root``.

    Re-running with the same Configuration and ``now`` rewrites identical
    bytes.
    """
    if now is None:
        now = datetime.now()
    documents = render_workspace(config, now, materialize_skills=materialize_skills)
    logger.debug("Rendered %d documents for %s", len(documents), config.workspace.name)
    return WorkspaceWriter(workspace_root).write(documents)
