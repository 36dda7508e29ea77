"""
Pytest configuration and fixtures.

Collaborators are the in-memory fakes from tests.fakes.
"""

from datetime import datetime, timedelta, timezone

import pytest

from oauth_grant.core.dependencies import build_password_grant
from oauth_grant.schemas.oauth import Client, Scope, TokenRequest
from oauth_grant.schemas.user import User
from tests.fakes import (
    InMemoryAccessTokenRepository,
    InMemoryClientRepository,
    InMemoryRefreshTokenRepository,
    InMemoryScopeRepository,
    InMemoryUserRepository,
    RecordingNotifier,
    SequentialTokenGenerator,
)

NOW = datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def scopes():
    return {
        "read": Scope(identifier="read", description="Read access"),
        "write": Scope(identifier="write", description="Write access"),
        "admin": Scope(identifier="admin", description="Administration"),
    }


@pytest.fixture
def client():
    return Client(
        identifier="web-app",
        allowed_grant_types=("password", "refresh_token"),
        allowed_scopes={"read", "write"},
    )


@pytest.fixture
def user():
    return User(identifier="user-42")


@pytest.fixture
def client_repository(client):
    return InMemoryClientRepository({"web-app": ("s3cret", client)})


@pytest.fixture
def user_repository(user):
    return InMemoryUserRepository({"alice": ("correct-horse", user)})


@pytest.fixture
def scope_repository(scopes):
    return InMemoryScopeRepository(list(scopes.values()))


@pytest.fixture
def access_token_repository():
    return InMemoryAccessTokenRepository()


@pytest.fixture
def refresh_token_repository():
    return InMemoryRefreshTokenRepository()


@pytest.fixture
def token_generator():
    return SequentialTokenGenerator()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def password_grant(
    client_repository,
    user_repository,
    scope_repository,
    access_token_repository,
    refresh_token_repository,
    notifier,
    token_generator,
    clock,
):
    return build_password_grant(
        client_repository=client_repository,
        user_repository=user_repository,
        scope_repository=scope_repository,
        access_token_repository=access_token_repository,
        refresh_token_repository=refresh_token_repository,
        notifier=notifier,
        token_generator=token_generator,
        clock=clock,
    )


@pytest.fixture
def token_request():
    return TokenRequest(
        grant_type="password",
        client_id="web-app",
        client_secret="s3cret",
        username="alice",
        password="correct-horse",
        scope="read write",
    )


@pytest.fixture
def access_token_ttl():
    return timedelta(hours=1)
