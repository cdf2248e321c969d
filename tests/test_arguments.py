"""Tests for helper argument tokenizing and classification."""

import pytest

from raptor.core.exceptions import HelperArgumentException
from raptor.templates.arguments import classify, tokenize
from raptor.templates.context import resolve_path
from raptor.templates.helpers import HelperRegistry


class TestTokenize:
    def test_splits_on_whitespace(self):
        assert tokenize("a b  c") == ["a", "b", "c"]

    def test_quoted_span_keeps_spaces(self):
        assert tokenize('"hello world" 5') == ['"hello world"', "5"]

    def test_escaped_quote_does_not_toggle(self):
        assert tokenize(r'"say \"hi there\"" x') == [r'"say \"hi there\""', "x"]

    def test_tabs_and_newlines_split(self):
        assert tokenize("a\tb\nc") == ["a", "b", "c"]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []


class TestClassify:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ('"hi"', "hi"),
            ('"true"', "true"),
            ('"42"', "42"),
            ('""', ""),
            ("5", 5),
            ("-3", -3),
            ("3.14", 3.14),
            ("1e3", 1000.0),
            ("true", True),
            ("false", False),
            ("null", None),
        ],
    )
    def test_literals(self, token, expected):
        is_literal, value = classify(token)
        assert is_literal is True
        assert value == expected
        assert type(value) is type(expected)

    @pytest.mark.parametrize("token", ["user.name", "this", "@index", "inf", "nan", "True", "NULL"])
    def test_paths(self, token):
        assert classify(token) == (False, token)


class TestParseArgs:
    @pytest.fixture
    def registry(self):
        return HelperRegistry()

    def test_literal_mix(self, registry):
        args = registry.parse_args('"hi" 5 true false null', {}, resolve_path)
        assert args == ["hi", 5, True, False, None]

    def test_path_resolves_from_context(self, registry):
        ctx = {"user": {"name": "Ana"}}
        assert registry.parse_args("user.name", ctx, resolve_path) == ["Ana"]

    def test_explicit_null_path_is_valid(self, registry):
        ctx = {"user": {"name": None}}
        assert registry.parse_args("user.name", ctx, resolve_path) == [None]

    def test_unresolved_path_raises(self, registry):
        with pytest.raises(HelperArgumentException) as exc_info:
            registry.parse_args("user.name", {}, resolve_path)
        assert exc_info.value.argument == "user.name"

    def test_resolver_receives_context(self, registry):
        calls = []

        def resolver(path, ctx):
            calls.append((path, ctx))
            return "value"

        ctx = {"a": 1}
        assert registry.parse_args("a.b 2", ctx, resolver) == ["value", 2]
        assert calls == [("a.b", ctx)]
