"""
Phonebook Backend: Person Model & Config Tests
=================================================

What:  Field rules on the Person model, the info page renderer and settings
       validation.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as SettingsValidationError

from phonebook.config import Settings
from phonebook.exceptions import PersonValidationError
from phonebook.models.person import NUMBER_MAX_LENGTH, Person
from phonebook.routes.info import render_info


class TestPersonFieldRules:

    def test_valid_person(self):
        person = Person(name="Ada", number="123")
        assert person.name == "Ada"
        assert person.number == "123"

    @pytest.mark.parametrize("field", ["name", "number"])
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required(self, field, value):
        values = {"name": "Ada", "number": "123", field: value}
        with pytest.raises(PersonValidationError, match=f"{field} is required") as exc_info:
            Person(**values)
        assert exc_info.value.field == field

    def test_number_too_long(self):
        with pytest.raises(PersonValidationError, match="at most 64"):
            Person(name="Ada", number="1" * (NUMBER_MAX_LENGTH + 1))

    def test_non_string_rejected(self):
        with pytest.raises(PersonValidationError, match="must be a string"):
            Person(name="Ada", number=123)

    def test_rule_runs_on_assignment(self):
        person = Person(name="Ada", number="123")
        with pytest.raises(PersonValidationError):
            person.name = ""
        assert person.name == "Ada"


class TestRenderInfo:

    def test_fragment(self):
        now = datetime(2026, 10, 19, 17, 22, 5, tzinfo=timezone.utc)

        html = render_info(3, now)

        assert html.startswith("<p>Phonebook has info for 3 people</p>")
        assert "Mon Oct 19 2026 17:22:05" in html


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 3001

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).port == 8080

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(SettingsValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_sqlite_detection(self):
        assert Settings(_env_file=None, database_url="sqlite+aiosqlite:///x.db").is_sqlite
        assert not Settings(
            _env_file=None, database_url="postgresql+asyncpg://u:p@h/db"
        ).is_sqlite
