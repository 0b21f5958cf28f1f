"""Document model — typed Markdown blocks plus YAML/JSON serialization.

Renderers decide *what* goes into a document by building a Page (an
ordered list of blocks); Page.render() is the only place that knows how
blocks turn into Markdown. Data documents go through to_yaml()/to_json().

Key classes: Document, Page.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union

import yaml


@dataclass(frozen=True)
class Document:
    """A rendered artifact: workspace-relative path and text content."""

    path: str
    content: str


# ---------------------------------------------------------------------------
# Markdown blocks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Heading:
    text: str
    level: int = 2

    def render(self) -> str:
        return f"{'#' * self.level} {self.text}"


@dataclass(frozen=True)
class Paragraph:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class BulletList:
    items: tuple[str, ...]
    indent: int = 0

    def render(self) -> str:
        pad = "  " * self.indent
        return "\n".join(f"{pad}- {item}" for item in self.items)


@dataclass(frozen=True)
class NumberedList:
    items: tuple[str, ...]

    def render(self) -> str:
        return "\n".join(f"{i}. {item}" for i, item in enumerate(self.items, 1))


@dataclass(frozen=True)
class Rule:
    def render(self) -> str:
        return "---"


@dataclass(frozen=True)
class Tight:
    """Blocks rendered on consecutive lines (no blank line between)."""

    blocks: tuple[Block, ...]

    def render(self) -> str:
        return "\n".join(b.render() for b in self.blocks if not _is_empty(b))


Block = Union[Heading, Paragraph, BulletList, NumberedList, Rule, Tight]


def _is_empty(block: Block) -> bool:
    if isinstance(block, (BulletList, NumberedList)):
        return not block.items
    if isinstance(block, Tight):
        return all(_is_empty(b) for b in block.blocks)
    return False


@dataclass
class Page:
    """Ordered blocks for one Markdown document."""

    blocks: list[Block] = field(default_factory=list)

    def add(self, *blocks: Block) -> Page:
        self.blocks.extend(blocks)
        return self

    def render(self) -> str:
        parts = [b.render() for b in self.blocks if not _is_empty(b)]
        return "\n\n".join(parts) + "\n"

    def to_document(self, path: str) -> Document:
        return Document(path, self.render())


# ---------------------------------------------------------------------------
# Data serialization
# ---------------------------------------------------------------------------


def to_yaml(data: Any) -> str:
    """Block-style YAML with key order preserved."""
    return yaml.safe_dump(
        data, sort_keys=False, allow_unicode=True, default_flow_style=False
    )


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
