"""
QuickNotes Backend - Settings Tests
======================================

What:  Tests for environment-driven Settings parsing and validation.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from quicknotes.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        s = Settings(_env_file=None)
        assert s.backend_port == 3001
        assert s.note_title_max_length == 256
        assert s.log_level == "INFO"
        assert s.cors_origins_list == ["*"]

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None)

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        assert Settings(_env_file=None).cors_origins_list == ["http://a.test", "http://b.test"]

    def test_title_limit_from_env(self, monkeypatch):
        monkeypatch.setenv("NOTE_TITLE_MAX_LENGTH", "64")
        assert Settings(_env_file=None).note_title_max_length == 64
