"""Tests for context path resolution, truthiness, escaping and display."""

from dataclasses import dataclass

import pytest

from raptor.core.types import MISSING, to_display
from raptor.templates.context import escape_html, is_truthy, item_context, resolve_path


@dataclass
class Profile:
    name: str
    bio: str | None = None


class TestResolvePath:
    """Dot-path lookup never raises and keeps MISSING distinct from None."""

    def test_nested_mapping(self):
        ctx = {"user": {"profile": {"name": "Ana"}}}
        assert resolve_path("user.profile.name", ctx) == "Ana"

    def test_top_level_key(self):
        assert resolve_path("title", {"title": "Home"}) == "Home"

    def test_missing_key_is_missing(self):
        assert resolve_path("user.email", {"user": {}}) is MISSING

    def test_explicit_none_is_none(self):
        assert resolve_path("user.email", {"user": {"email": None}}) is None

    def test_through_none_is_missing(self):
        assert resolve_path("user.profile.name", {"user": {"profile": None}}) is MISSING

    def test_through_scalar_is_missing(self):
        assert resolve_path("title.length", {"title": "abc"}) is MISSING

    def test_list_index_and_length(self):
        ctx = {"items": ["a", "b", "c"]}
        assert resolve_path("items.1", ctx) == "b"
        assert resolve_path("items.length", ctx) == 3
        assert resolve_path("items.9", ctx) is MISSING

    @pytest.mark.parametrize("part", ["²", "١", "-1", "1.0"])
    def test_non_ascii_or_signed_index_is_missing(self, part):
        assert resolve_path(f"items.{part}", {"items": ["a", "b"]}) is MISSING

    def test_object_attribute(self):
        ctx = {"profile": Profile(name="Ana")}
        assert resolve_path("profile.name", ctx) == "Ana"
        assert resolve_path("profile.bio", ctx) is None
        assert resolve_path("profile.age", ctx) is MISSING

    def test_private_attribute_not_exposed(self):
        ctx = {"profile": Profile(name="Ana")}
        assert resolve_path("profile.__dict__", ctx) is MISSING

    def test_special_loop_keys(self):
        ctx = item_context({"x": 1}, {"v": "a"}, 0, 2)
        assert resolve_path("this.v", ctx) == "a"
        assert resolve_path("@index", ctx) == 0
        assert resolve_path("@first", ctx) is True
        assert resolve_path("@last", ctx) is False
        assert resolve_path("x", ctx) == 1


class TestIsTruthy:
    @pytest.mark.parametrize("value", [False, None, MISSING, "", [], ()])
    def test_falsy(self, value):
        assert is_truthy(value) is False

    @pytest.mark.parametrize("value", [0, 0.0, "0", "false", [0], {}, {"a": 1}, True, object()])
    def test_truthy(self, value):
        assert is_truthy(value) is True


class TestEscapeHtml:
    def test_escapes_all_special_characters(self):
        assert escape_html("<a href=\"x\">Tom & Jerry's</a>") == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;"
        )

    def test_plain_text_unchanged(self):
        assert escape_html("hello world") == "hello world"

    def test_ampersand_not_double_escaped_in_one_pass(self):
        assert escape_html("&lt;") == "&amp;lt;"


class TestToDisplay:
    def test_none_and_missing_are_empty(self):
        assert to_display(None) == ""
        assert to_display(MISSING) == ""

    def test_booleans_are_lowercase(self):
        assert to_display(True) == "true"
        assert to_display(False) == "false"

    def test_numbers(self):
        assert to_display(5) == "5"
        assert to_display(5.0) == "5"
        assert to_display(2.5) == "2.5"
        assert to_display(0) == "0"

    def test_sequences_are_comma_joined(self):
        assert to_display(["a", 1, None, True]) == "a,1,,true"
