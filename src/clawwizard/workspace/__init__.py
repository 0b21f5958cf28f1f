"""Workspace materialization."""

from .writer import WORKSPACE_DIRS, WorkspaceWriter

__all__ = ["WORKSPACE_DIRS", "WorkspaceWriter"]
