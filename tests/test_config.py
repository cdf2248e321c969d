"""Tests for view settings and logging setup."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from raptor.config import ViewSettings, load_settings
from raptor.utilities.logging import setup_logging


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings == ViewSettings()
        assert settings.views_directory == Path("views")
        assert settings.default_layout == "main"
        assert settings.content_annotation == "@content"
        assert settings.max_partial_depth == 32

    def test_from_environment(self):
        settings = load_settings(
            {
                "RAPTOR_VIEWS_DIR": "/srv/views",
                "RAPTOR_DEFAULT_LAYOUT": "site",
                "RAPTOR_CONTENT_ANNOTATION": "<!-- body -->",
                "RAPTOR_MAX_PARTIAL_DEPTH": "8",
                "RAPTOR_LOG_LEVEL": "DEBUG",
            }
        )
        assert settings.views_directory == Path("/srv/views")
        assert settings.default_layout == "site"
        assert settings.content_annotation == "<!-- body -->"
        assert settings.max_partial_depth == 8
        assert settings.log_level == "DEBUG"

    def test_empty_values_ignored(self):
        assert load_settings({"RAPTOR_DEFAULT_LAYOUT": ""}).default_layout == "main"

    def test_overrides_win(self):
        settings = load_settings({"RAPTOR_DEFAULT_LAYOUT": "site"}, default_layout="admin")
        assert settings.default_layout == "admin"

    def test_invalid_depth(self):
        with pytest.raises(ValidationError):
            load_settings({"RAPTOR_MAX_PARTIAL_DEPTH": "0"})


class TestSetupLogging:
    def test_idempotent(self):
        first = setup_logging("DEBUG")
        handlers = list(first.handlers)
        second = setup_logging("WARNING")
        assert second is first
        assert second.handlers == handlers
        assert second.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("LOUD").level == logging.INFO
