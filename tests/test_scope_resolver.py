"""
Unit tests for scope resolution.
"""

from unittest.mock import MagicMock

import pytest

from oauth_grant.core.exceptions import InvalidScopeError
from oauth_grant.services.scope_resolver import ScopeResolver, split_scopes
from tests.fakes import InMemoryScopeRepository


@pytest.fixture
def resolver(scope_repository):
    return ScopeResolver(scope_repository)


def test_split_scopes_keeps_order_and_drops_duplicates():
    assert split_scopes("  write read  write ") == ["write", "read"]


def test_split_scopes_custom_delimiter():
    assert split_scopes("read,write", ",") == ["read", "write"]


def test_resolves_permitted_scopes(resolver, client, scopes):
    result = resolver.resolve("write read", " ", client, "password")

    assert result == [scopes["write"], scopes["read"]]


def test_repeated_scope_looked_up_once(client, scopes):
    scope_repository = MagicMock()
    scope_repository.get_scope.return_value = scopes["read"]

    result = ScopeResolver(scope_repository).resolve("read read", " ", client, "password")

    assert result == [scopes["read"]]
    scope_repository.get_scope.assert_called_once_with("read", "password", "web-app")


def test_scope_not_permitted_for_client(resolver, client):
    with pytest.raises(InvalidScopeError) as exc_info:
        resolver.resolve("read write admin", " ", client, "password")

    assert exc_info.value.scope == "admin"
    assert exc_info.value.error_type == "invalid_scope"


def test_unknown_scope(resolver, client):
    with pytest.raises(InvalidScopeError) as exc_info:
        resolver.resolve("read delete", " ", client, "password")

    assert exc_info.value.hint == "Check the `delete` scope"


def test_empty_request_uses_directory_defaults(scopes, client):
    resolver = ScopeResolver(InMemoryScopeRepository(list(scopes.values()), default_scopes=["read"]))

    assert resolver.resolve("", " ", client, "password") == [scopes["read"]]


def test_empty_request_without_defaults(resolver, client):
    assert resolver.resolve("", " ", client, "password") == []


def test_default_scopes_must_be_permitted(scopes, client):
    resolver = ScopeResolver(InMemoryScopeRepository(list(scopes.values()), default_scopes=["admin"]))

    with pytest.raises(InvalidScopeError):
        resolver.resolve("", " ", client, "password")
