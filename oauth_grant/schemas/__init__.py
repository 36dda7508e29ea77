"""Pydantic schemas"""

from oauth_grant.schemas.oauth import (
    Client,
    ClientCredentials,
    GrantType,
    Scope,
    TokenErrorResponse,
    TokenRequest,
    TokenResponse,
    UserCredentials,
)
from oauth_grant.schemas.token import AccessToken, IssuedTokens, RefreshToken
from oauth_grant.schemas.user import User

__all__ = [
    # OAuth
    "GrantType",
    "TokenRequest",
    "ClientCredentials",
    "UserCredentials",
    "Client",
    "Scope",
    "TokenResponse",
    "TokenErrorResponse",
    # Token
    "AccessToken",
    "RefreshToken",
    "IssuedTokens",
    # User
    "User",
]
