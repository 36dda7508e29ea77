"""
Unit tests for utilities and configuration.
"""

from datetime import datetime, timezone

import pytest

from oauth_grant.core.config import Settings
from oauth_grant.utils.crypto import SecureKeyGenerator, generate_secret
from oauth_grant.utils.dates import add_months


@pytest.mark.parametrize(
    "start,months,expected",
    [
        (datetime(2024, 3, 15, 8, 30), 1, datetime(2024, 4, 15, 8, 30)),
        (datetime(2024, 1, 31), 1, datetime(2024, 3, 2)),
        (datetime(2023, 1, 31), 1, datetime(2023, 3, 3)),
        (datetime(2024, 12, 10), 1, datetime(2025, 1, 10)),
        (datetime(2024, 3, 31), -1, datetime(2024, 3, 2)),
        (datetime(2024, 3, 29), -1, datetime(2024, 2, 29)),
        (datetime(2024, 11, 30), 3, datetime(2025, 3, 2)),
    ],
)
def test_add_months(start, months, expected):
    assert add_months(start, months) == expected


def test_add_months_keeps_timezone():
    start = datetime(2024, 5, 31, tzinfo=timezone.utc)

    assert add_months(start, 1) == datetime(2024, 7, 1, tzinfo=timezone.utc)


def test_generate_secret_length():
    assert len(generate_secret(16)) == 32


def test_secure_key_generator_unique():
    generator = SecureKeyGenerator(length=8)

    identifiers = {generator.new_identifier() for _ in range(100)}

    assert len(identifiers) == 100
    assert all(len(identifier) == 16 for identifier in identifiers)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("OAUTH_GRANT__ACCESS_TOKEN_LIFETIME", "900")
    monkeypatch.setenv("OAUTH_GRANT__ALLOW_BASIC_AUTH_USER_CREDENTIALS", "false")

    settings = Settings()

    assert settings.access_token_lifetime == 900
    assert settings.allow_basic_auth_user_credentials is False
    assert settings.scope_delimiter == " "
