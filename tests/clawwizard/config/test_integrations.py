"""Tests for config/integrations.py — tool toggle expansion."""

from clawwizard.config.integrations import KNOWN_TOOLS, expand_integrations


class TestExpandIntegrations:
    def test_github(self):
        result = expand_integrations(["github"])
        assert list(result) == ["github"]
        assert result["github"].to_dict() == {
            "features": ["pr_reviews", "issue_tracking", "repo_analytics"]
        }

    def test_gmail_maps_to_email(self):
        result = expand_integrations(["gmail"])
        assert result["email"].to_dict() == {
            "provider": "gmail",
            "features": ["automation", "smart_inbox", "scheduling"],
        }

    def test_calendar(self):
        assert expand_integrations(["calendar"])["calendar"].provider == "google"

    def test_social_has_platforms(self):
        d = expand_integrations(["social"])["social"].to_dict()
        assert d["platforms"] == ["linkedin", "twitter"]
        assert "provider" not in d

    def test_unknown_ignored(self):
        assert expand_integrations(["slack", "github"]).keys() == {"github"}

    def test_empty(self):
        assert expand_integrations([]) == {}

    def test_table_order_not_toggle_order(self):
        result = expand_integrations(["social", "github", "gmail"])
        assert list(result) == ["email", "github", "social"]

    def test_known_tools(self):
        assert KNOWN_TOOLS == ("gmail", "calendar", "github", "social")
