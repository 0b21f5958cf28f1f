"""Workspace materialization — writes rendered Documents under a root dir.

Layout (relative to the workspace root):
  - config/, automations/, workflows/, integrations/, docs/, logs/,
    templates/, skills/   — always created
  - any further parents a Document path needs (e.g. skills/<name>/)

Writes are unconditional overwrites. Nothing is ever deleted, so files the
user added to the workspace survive a re-run.

Key class: WorkspaceWriter.
"""

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from ..render.document import Document

logger = logging.getLogger(__name__)

WORKSPACE_DIRS = [
    "config",
    "automations",
    "workflows",
    "integrations",
    "docs",
    "logs",
    "templates",
    "skills",
]


class WorkspaceWriter:
    """Creates the workspace tree and writes Documents into it."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def init_dirs(self) -> None:
        """Create the root and the standard subdirectories.

        Safe to call multiple times.
        """
        self.root.mkdir(parents=True, exist_ok=True)
        for name in WORKSPACE_DIRS:
            (self.root / name).mkdir(exist_ok=True)
        logger.debug("Workspace directories ready at %s", self.root)

    def resolve(self, relative: str) -> Path:
        """Map a Document path to a filesystem path inside the root.

        Raises:
            ValueError: If the path is absolute or escapes the root.
        """
        rel = PurePosixPath(relative)
        if not relative or rel.is_absolute() or ".." in rel.parts:
            raise ValueError(f"Document path must stay inside the workspace: {relative!r}")
        return self.root.joinpath(*rel.parts)

    def write(self, documents: Iterable[Document]) -> Path:
        """Write all documents, overwriting existing files.

        Paths are validated before anything touches the disk. OSError from
        the filesystem propagates; files already written stay in place.

        Returns:
            The workspace root.
        """
        targets = [(self.resolve(doc.path), doc) for doc in documents]

        self.init_dirs()
        for path, doc in targets:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(doc.content)
            logger.debug("Wrote %s", path)

        logger.info("Wrote %d files to %s", len(targets), self.root)
        return self.root
