"""Token issuance"""

from datetime import datetime, timedelta
from typing import Callable, Iterable

from oauth_grant.core.config import logger
from oauth_grant.ports.repositories import AccessTokenRepository, RefreshTokenRepository
from oauth_grant.ports.token_generator import TokenGenerator
from oauth_grant.schemas.oauth import Client, Scope
from oauth_grant.schemas.token import AccessToken, IssuedTokens, RefreshToken
from oauth_grant.schemas.user import User
from oauth_grant.utils.dates import add_months, utc_now

REFRESH_TOKEN_TTL_MONTHS = 1


class TokenIssuer:
    """Creates and persists an access token together with its refresh token"""

    def __init__(
        self,
        access_token_repository: AccessTokenRepository,
        refresh_token_repository: RefreshTokenRepository,
        token_generator: TokenGenerator,
        clock: Callable[[], datetime] = utc_now,
        refresh_token_ttl_months: int = REFRESH_TOKEN_TTL_MONTHS,
    ):
        self.access_token_repository = access_token_repository
        self.refresh_token_repository = refresh_token_repository
        self.token_generator = token_generator
        self.clock = clock
        self.refresh_token_ttl_months = refresh_token_ttl_months

    def issue(
        self,
        client: Client,
        user: User,
        scopes: Iterable[Scope],
        access_token_ttl: timedelta,
    ) -> IssuedTokens:
        """
        Issue an access token and its refresh token

        The refresh token lifetime does not depend on ``access_token_ttl``.
        Both tokens are persisted, access token first. Storage errors
        propagate; an access token already stored is not rolled back.

        Args:
            client: Authenticated client
            user: Authenticated resource owner
            scopes: Resolved scopes
            access_token_ttl: Access token lifetime

        Returns:
            IssuedTokens

        Raises:
            ValueError: If access_token_ttl is not positive
        """
        if access_token_ttl <= timedelta(0):
            raise ValueError("Access token lifetime must be positive")

        issued_at = self.clock()

        access_token = AccessToken(
            identifier=self.token_generator.new_identifier(),
            expires_at=issued_at + access_token_ttl,
            client=client,
            user_identifier=user.identifier,
            scopes=tuple(scopes),
        )

        refresh_token = RefreshToken(
            identifier=self.token_generator.new_identifier(),
            expires_at=add_months(issued_at, self.refresh_token_ttl_months),
            access_token=access_token,
        )

        self.access_token_repository.persist_new_access_token(access_token)
        self.refresh_token_repository.persist_new_refresh_token(refresh_token)

        logger.info(
            "Token pair issued",
            extra={
                "trace_point": "token_pair_issued",
                "user_id": user.identifier,
                "client_id": client.identifier,
                "access_expires_at": access_token.expires_at.isoformat(),
                "refresh_expires_at": refresh_token.expires_at.isoformat(),
            },
        )

        return IssuedTokens(
            access_token=access_token,
            refresh_token=refresh_token,
            issued_at=issued_at,
        )
