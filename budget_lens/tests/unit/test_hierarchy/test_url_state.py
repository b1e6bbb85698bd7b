# Path: budget_lens/tests/unit/test_hierarchy/test_url_state.py
"""
Tests for the URL state collaborator and path codec.
"""

from budget_lens.process.hierarchy.url_state import (
    InMemoryUrlState,
    format_path_param,
    parse_path_param,
)


class TestPathCodec:
    """Test parse_path_param / format_path_param."""

    def test_parse(self):
        assert parse_path_param("dod,army") == ["dod", "army"]

    def test_parse_absent_or_empty(self):
        assert parse_path_param(None) == []
        assert parse_path_param("") == []

    def test_parse_drops_empty_segments(self):
        assert parse_path_param(",dod,,army,") == ["dod", "army"]

    def test_format(self):
        assert format_path_param(["dod", "army"]) == "dod,army"

    def test_format_empty_is_none(self):
        """An empty path removes the parameter."""
        assert format_path_param([]) is None


class TestInMemoryUrlState:
    """Test the in-memory URL."""

    def test_read_missing_param(self, url_state):
        assert url_state.get_param("path") is None
        assert url_state.read_path("path") == []

    def test_read_existing_param(self):
        state = InMemoryUrlState("https://example.org/budget?path=dod,army")
        assert state.read_path("path") == ["dod", "army"]

    def test_write_then_read(self, url_state):
        url_state.write_path("path", ["dod", "army"])
        assert url_state.read_path("path") == ["dod", "army"]

    def test_write_replaces_history_entry(self, url_state):
        """Writes never add history entries."""
        url_state.write_path("path", ["dod"])
        url_state.write_path("path", ["dod", "army"])
        assert len(url_state.history) == 1

    def test_other_params_kept_in_place(self):
        state = InMemoryUrlState("https://example.org/budget?lang=en&path=x&view=tree")
        state.write_path("path", ["y"])
        assert state.url == "https://example.org/budget?lang=en&path=y&view=tree"

    def test_empty_path_removes_param(self):
        state = InMemoryUrlState("https://example.org/budget?lang=en&path=x")
        state.write_path("path", [])
        assert state.url == "https://example.org/budget?lang=en"

    def test_push_adds_history(self, url_state):
        url_state.push("https://example.org/other")
        assert len(url_state.history) == 2
        assert url_state.url == "https://example.org/other"
