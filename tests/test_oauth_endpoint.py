"""
Integration tests for the token endpoint.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from oauth_grant.main import create_app
from oauth_grant.ports.events import CLIENT_AUTHENTICATION_FAILED


@pytest.fixture
def http_client(password_grant):
    return TestClient(create_app(password_grant))


@pytest.fixture
def form():
    return {
        "grant_type": "password",
        "client_id": "web-app",
        "client_secret": "s3cret",
        "username": "alice",
        "password": "correct-horse",
        "scope": "read",
    }


def test_health(http_client):
    response = http_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_password_grant_success(http_client, form):
    response = http_client.post("/oauth/token", data=form)

    assert response.status_code == 200
    assert response.headers["cache-control"] == "no-store"
    assert response.headers["pragma"] == "no-cache"
    assert response.json() == {
        "access_token": "token-1",
        "refresh_token": "token-2",
        "token_type": "Bearer",
        "expires_in": 3600,
        "scope": "read",
    }


def test_client_credentials_from_basic_auth(http_client, form):
    del form["client_id"], form["client_secret"]

    response = http_client.post("/oauth/token", data=form, auth=("web-app", "s3cret"))

    assert response.status_code == 200
    assert response.json()["access_token"] == "token-1"


def test_missing_username(http_client, form):
    del form["username"]

    response = http_client.post("/oauth/token", data=form)

    assert response.status_code == 400
    assert response.json() == {
        "error": "invalid_request",
        "error_description": (
            "The request is missing a required parameter, includes an invalid parameter value, "
            "includes a parameter more than once, or is otherwise malformed."
        ),
        "hint": "`username` parameter is missing",
    }


def test_invalid_client(http_client, form, notifier):
    form["client_secret"] = "wrong"

    response = http_client.post("/oauth/token", data=form)

    assert response.status_code == 401
    assert response.json()["error"] == "invalid_client"
    assert response.headers["www-authenticate"] == 'Basic realm="OAuth"'
    assert [event for event, _ in notifier.events] == [CLIENT_AUTHENTICATION_FAILED]


def test_invalid_credentials(http_client, form):
    form["password"] = "wrong"

    response = http_client.post("/oauth/token", data=form)

    assert response.status_code == 401
    assert response.json() == {
        "error": "invalid_credentials",
        "error_description": "The user credentials were incorrect.",
    }


def test_invalid_scope(http_client, form):
    form["scope"] = "read write admin"

    response = http_client.post("/oauth/token", data=form)

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_scope"
    assert response.json()["hint"] == "Check the `admin` scope"


def test_unsupported_grant_type(http_client, form):
    form["grant_type"] = "client_credentials"

    response = http_client.post("/oauth/token", data=form)

    assert response.status_code == 400
    assert response.json()["error"] == "unsupported_grant_type"


def test_storage_failure_is_not_leaked(http_client, form, access_token_repository, monkeypatch):
    monkeypatch.setattr(
        access_token_repository,
        "persist_new_access_token",
        MagicMock(side_effect=RuntimeError("duplicate key value violates unique constraint")),
    )

    response = http_client.post("/oauth/token", data=form)

    assert response.status_code == 500
    assert response.json() == {
        "error": "server_error",
        "error_description": "An internal error occurred",
    }


def test_invalid_client_without_username(http_client, form, notifier):
    form["client_secret"] = "wrong"
    del form["username"]

    response = http_client.post("/oauth/token", data=form)

    assert response.status_code == 401
    assert response.json()["error"] == "invalid_client"
    assert [event for event, _ in notifier.events] == [CLIENT_AUTHENTICATION_FAILED]
