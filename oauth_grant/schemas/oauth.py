"""OAuth schemas"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from oauth_grant.schemas.token import IssuedTokens


class GrantType(str, Enum):
    """OAuth2 grant types handled here"""

    PASSWORD = "password"


class TokenRequest(BaseModel):
    """
    OAuth2 token request as handed over by the transport layer

    Body fields and HTTP Basic credentials are kept apart; which one wins is
    decided by the credential extractor.
    """

    model_config = ConfigDict(frozen=True)

    grant_type: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    username: str | None = None
    password: str | None = None
    scope: str | None = None

    # Transport-level Basic auth
    basic_auth_user: str | None = None
    basic_auth_password: str | None = None

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks
        return (
            f"TokenRequest(grant_type={self.grant_type!r}, client_id={self.client_id!r}, "
            f"username={self.username!r}, scope={self.scope!r}, "
            f"basic_auth_user={self.basic_auth_user!r})"
        )

    __str__ = __repr__


class ClientCredentials(BaseModel):
    """Client credentials resolved from a token request"""

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str = Field(repr=False)


class UserCredentials(BaseModel):
    """Resource owner credentials resolved from a token request"""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)


class Scope(BaseModel):
    """Named permission unit"""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1)
    description: str | None = None


class Client(BaseModel):
    """OAuth client as known to the client directory"""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1)
    allowed_grant_types: tuple[str, ...] = (GrantType.PASSWORD.value,)
    allowed_scopes: frozenset[str] = frozenset()

    def allows_scope(self, identifier: str) -> bool:
        """Check if the scope may be granted to this client"""
        return identifier in self.allowed_scopes


class TokenResponse(BaseModel):
    """OAuth2 token response"""

    access_token: str
    refresh_token: str
    token_type: str = "Bearer"
    expires_in: int
    scope: str | None = None

    @classmethod
    def from_issued_tokens(
        cls,
        tokens: IssuedTokens,
        scope_delimiter: str = " ",
    ) -> TokenResponse:
        """
        Bind an issued token pair into the response payload

        Args:
            tokens: Access and refresh token issued together
            scope_delimiter: Delimiter used to join granted scopes

        Returns:
            TokenResponse ready for serialization
        """
        access_token = tokens.access_token
        expires_in = int((access_token.expires_at - tokens.issued_at).total_seconds())

        return cls(
            access_token=access_token.identifier,
            refresh_token=tokens.refresh_token.identifier,
            expires_in=expires_in,
            scope=scope_delimiter.join(scope.identifier for scope in access_token.scopes),
        )


class TokenErrorResponse(BaseModel):
    """OAuth2 error response"""

    error: str
    error_description: str | None = None
    hint: str | None = None
    error_uri: str | None = None
