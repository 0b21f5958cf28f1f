"""Tests for render/document.py — block model and serializers."""

import json

import yaml

from clawwizard.render.document import (
    BulletList,
    Heading,
    NumberedList,
    Page,
    Paragraph,
    Rule,
    Tight,
    to_json,
    to_yaml,
)


class TestBlocks:
    def test_heading_levels(self):
        assert Heading("Title", 1).render() == "# Title"
        assert Heading("Section").render() == "## Section"

    def test_bullets_indent(self):
        assert BulletList(("a", "b"), indent=1).render() == "  - a\n  - b"

    def test_numbered(self):
        assert NumberedList(("x", "y")).render() == "1. x\n2. y"

    def test_tight_skips_empty_lists(self):
        block = Tight((Heading("H", 3), BulletList(("a",)), BulletList(())))
        assert block.render() == "### H\n- a"


class TestPage:
    def test_blocks_separated_by_blank_line(self):
        page = Page().add(Heading("T", 1), Paragraph("body"), Rule())
        assert page.render() == "# T\n\nbody\n\n---\n"

    def test_empty_blocks_dropped(self):
        page = Page().add(Paragraph("a"), BulletList(()), Paragraph("b"))
        assert page.render() == "a\n\nb\n"

    def test_to_document(self):
        doc = Page().add(Paragraph("x")).to_document("docs/x.md")
        assert doc.path == "docs/x.md"
        assert doc.content == "x\n"


class TestSerializers:
    def test_yaml_preserves_key_order(self):
        text = to_yaml({"zeta": 1, "alpha": [1, 2]})
        assert text.index("zeta") < text.index("alpha")
        assert yaml.safe_load(text) == {"zeta": 1, "alpha": [1, 2]}

    def test_yaml_unicode(self):
        assert "é" in to_yaml({"name": "café"})

    def test_json_trailing_newline(self):
        text = to_json({"a": 1})
        assert text.endswith("}\n")
        assert json.loads(text) == {"a": 1}
