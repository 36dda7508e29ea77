"""Token schemas"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from oauth_grant.schemas.oauth import Client, Scope


class AccessToken(BaseModel):
    """Access token issued to a client on behalf of a user"""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1, description="Unguessable token string")
    expires_at: datetime = Field(..., description="Expiry timestamp")
    client: Client = Field(..., description="Owning client")
    user_identifier: str = Field(..., description="Resource owner identifier")
    scopes: tuple[Scope, ...] = Field(default=(), description="Granted scopes")


class RefreshToken(BaseModel):
    """Refresh token bound to the access token it was issued with"""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1, description="Unguessable token string")
    expires_at: datetime = Field(..., description="Expiry timestamp")
    access_token: AccessToken = Field(..., description="Access token issued alongside")


class IssuedTokens(BaseModel):
    """Pair of access and refresh tokens"""

    model_config = ConfigDict(frozen=True)

    access_token: AccessToken
    refresh_token: RefreshToken
    issued_at: datetime
