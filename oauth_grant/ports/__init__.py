"""Collaborator interfaces"""

from oauth_grant.ports.events import (
    CLIENT_AUTHENTICATION_FAILED,
    USER_AUTHENTICATION_FAILED,
    SecurityEventNotifier,
)
from oauth_grant.ports.repositories import (
    AccessTokenRepository,
    ClientRepository,
    RefreshTokenRepository,
    ScopeRepository,
    UserRepository,
)
from oauth_grant.ports.token_generator import TokenGenerator

__all__ = [
    "ClientRepository",
    "UserRepository",
    "ScopeRepository",
    "AccessTokenRepository",
    "RefreshTokenRepository",
    "TokenGenerator",
    "SecurityEventNotifier",
    "CLIENT_AUTHENTICATION_FAILED",
    "USER_AUTHENTICATION_FAILED",
]
