"""Tool toggles → integration entries.

Each recognized tool identifier expands to one fixed integration entry.
Unknown identifiers are skipped so older wizards accept newer answer sets.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrationSpec:
    """Provider/platforms and the feature list enabled for one service."""

    features: tuple[str, ...]
    provider: str = ""
    platforms: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {}
        if self.provider:
            d["provider"] = self.provider
        if self.platforms:
            d["platforms"] = list(self.platforms)
        d["features"] = list(self.features)
        return d


# tool id → (integration key, spec), in output order
INTEGRATION_TABLE: tuple[tuple[str, str, IntegrationSpec], ...] = (
    (
        "gmail",
        "email",
        IntegrationSpec(
            provider="gmail",
            features=("automation", "smart_inbox", "scheduling"),
        ),
    ),
    (
        "calendar",
        "calendar",
        IntegrationSpec(
            provider="google",
            features=("scheduling", "meeting_prep", "availability"),
        ),
    ),
    (
        "github",
        "github",
        IntegrationSpec(features=("pr_reviews", "issue_tracking", "repo_analytics")),
    ),
    (
        "social",
        "social",
        IntegrationSpec(
            platforms=("linkedin", "twitter"),
            features=("content_scheduling", "analytics", "engagement"),
        ),
    ),
)

KNOWN_TOOLS = tuple(tool for tool, _, _ in INTEGRATION_TABLE)


def expand_integrations(toggles: Iterable[str]) -> dict[str, IntegrationSpec]:
    """Expand selected tool ids into integration entries (table order)."""
    selected = set(toggles)
    unknown = selected.difference(KNOWN_TOOLS)
    if unknown:
        logger.debug("Ignoring unrecognized tools: %s", ", ".join(sorted(unknown)))
    return {key: spec for tool, key, spec in INTEGRATION_TABLE if tool in selected}
