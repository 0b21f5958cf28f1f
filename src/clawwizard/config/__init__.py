"""Configuration assembly: answers + template + integrations → Configuration."""

from .assembler import (
    Answers,
    Configuration,
    ConfigurationAssembler,
    UserProfile,
    WorkspaceInfo,
    assemble,
)
from .integrations import IntegrationSpec, expand_integrations

__all__ = [
    "Answers",
    "Configuration",
    "ConfigurationAssembler",
    "IntegrationSpec",
    "UserProfile",
    "WorkspaceInfo",
    "assemble",
    "expand_integrations",
]
