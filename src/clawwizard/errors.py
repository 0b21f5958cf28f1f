"""Exception types raised by the wizard.

Filesystem failures are not wrapped: they surface as the builtin OSError.
"""


class WizardError(Exception):
    """Base class for wizard failures reported to the user."""


class TemplateNotFound(WizardError, LookupError):
    """No role template is registered for the requested user type."""

    def __init__(self, role: str, available: list[str] | None = None) -> None:
        self.role = role
        self.available = available or []
        msg = f"No template found for role '{role}'"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)


class SystemCheckError(WizardError, RuntimeError):
    """The local environment cannot run the wizard or the OpenClaw runtime."""
