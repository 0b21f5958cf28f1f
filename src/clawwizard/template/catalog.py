"""Role template catalog — looks up templates by user type.

Templates are YAML files named ``<role>.yaml``. The bundled set lives in
``roles/`` next to this module; an optional user directory (settings
``templates_dir``) is searched first so users can override or add roles.

Key class: TemplateCatalog.
"""

import logging
from pathlib import Path

import yaml

from ..errors import TemplateNotFound
from .types import Template

logger = logging.getLogger(__name__)

# Role templates bundled with the package
_ROLES_DIR = Path(__file__).parent / "roles"


class TemplateCatalog:
    """Maps a user type to its parsed Template."""

    def __init__(self, extra_dirs: list[Path] | None = None) -> None:
        self.search_dirs: list[Path] = [*(extra_dirs or []), _ROLES_DIR]

    def _find(self, role: str) -> Path | None:
        for directory in self.search_dirs:
            path = directory / f"{role}.yaml"
            if path.is_file():
                return path
        return None

    def roles(self) -> list[str]:
        """All role keys, bundled and user-defined, sorted."""
        found: set[str] = set()
        for directory in self.search_dirs:
            if directory.is_dir():
                found.update(p.stem for p in directory.glob("*.yaml"))
        return sorted(found)

    def load(self, role: str) -> Template:
        """Parse the template for ``role``.

        Raises:
            TemplateNotFound: If no search dir has ``<role>.yaml``.
            ValueError: If the file is not a valid template.
        """
        path = self._find(role) if role and "/" not in role else None
        if path is None:
            raise TemplateNotFound(role, self.roles())

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in template {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Template {path} must be a YAML mapping.")

        try:
            template = Template.from_dict(data)
        except ValueError as e:
            raise ValueError(f"Invalid template {path}: {e}") from e
        logger.debug("Loaded template '%s' from %s", role, path)
        return template

    def __contains__(self, role: str) -> bool:
        return bool(role) and "/" not in role and self._find(role) is not None
