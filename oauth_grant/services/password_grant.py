"""Resource owner password credentials grant"""

from datetime import timedelta
from enum import Enum

from oauth_grant.core.config import logger
from oauth_grant.schemas.oauth import GrantType, TokenRequest
from oauth_grant.schemas.token import IssuedTokens
from oauth_grant.services.client_authenticator import ClientAuthenticator
from oauth_grant.services.credential_extractor import (
    extract_client_credentials,
    extract_user_credentials,
)
from oauth_grant.services.scope_resolver import ScopeResolver
from oauth_grant.services.token_issuer import TokenIssuer
from oauth_grant.services.user_authenticator import ResourceOwnerAuthenticator


class GrantState(str, Enum):
    """Stages of a password grant request"""

    START = "start"
    CLIENT_VALIDATED = "client_validated"
    USER_VALIDATED = "user_validated"
    SCOPES_RESOLVED = "scopes_resolved"
    TOKENS_ISSUED = "tokens_issued"
    COMPLETE = "complete"
    ERROR = "error"


class PasswordGrant:
    """
    Exchanges resource owner credentials for an access and refresh token

    Pipeline: extract credentials, authenticate the client, authenticate the
    user, resolve scopes, issue tokens. Every failure is terminal and
    propagates to the caller unchanged.
    """

    identifier = GrantType.PASSWORD.value

    def __init__(
        self,
        client_authenticator: ClientAuthenticator,
        user_authenticator: ResourceOwnerAuthenticator,
        scope_resolver: ScopeResolver,
        token_issuer: TokenIssuer,
        allow_basic_auth_user_credentials: bool = True,
    ):
        self.client_authenticator = client_authenticator
        self.user_authenticator = user_authenticator
        self.scope_resolver = scope_resolver
        self.token_issuer = token_issuer
        self.allow_basic_auth_user_credentials = allow_basic_auth_user_credentials

    def can_handle(self, request: TokenRequest) -> bool:
        """Check if the request asks for this grant"""
        return request.grant_type == self.identifier

    def respond_to_request(
        self,
        request: TokenRequest,
        access_token_ttl: timedelta,
        scope_delimiter: str = " ",
    ) -> IssuedTokens:
        """
        Handle a password grant token request

        Args:
            request: Token request
            access_token_ttl: Access token lifetime
            scope_delimiter: Delimiter of the requested scope string

        Returns:
            IssuedTokens for the response binding

        Raises:
            OAuthServerException: Request, client, credentials or scope rejected
        """
        state = GrantState.START
        try:
            client_credentials = extract_client_credentials(request)
            client = self.client_authenticator.authenticate(
                request,
                client_credentials.client_id,
                client_credentials.client_secret,
                self.identifier,
            )
            state = self._advance(state, GrantState.CLIENT_VALIDATED)

            user_credentials = extract_user_credentials(
                request, self.allow_basic_auth_user_credentials
            )
            user = self.user_authenticator.authenticate(
                request,
                user_credentials.username,
                user_credentials.password,
            )
            state = self._advance(state, GrantState.USER_VALIDATED)

            scopes = self.scope_resolver.resolve(
                request.scope if request.scope is not None else "",
                scope_delimiter,
                client,
                self.identifier,
            )
            state = self._advance(state, GrantState.SCOPES_RESOLVED)

            tokens = self.token_issuer.issue(client, user, scopes, access_token_ttl)
            state = self._advance(state, GrantState.TOKENS_ISSUED)

        except Exception as e:
            logger.info(
                f"Password grant failed after {state.value}: {type(e).__name__}",
                extra={
                    "trace_point": "password_grant_failed",
                    "state": GrantState.ERROR.value,
                    "last_state": state.value,
                    "error_type": type(e).__name__,
                },
            )
            raise

        self._advance(state, GrantState.COMPLETE)
        logger.info(
            f"Password grant successful: user={user.identifier}, client={client.identifier}",
            extra={
                "trace_point": "password_grant_complete",
                "user_id": user.identifier,
                "client_id": client.identifier,
                "scope_count": len(scopes),
            },
        )
        return tokens

    @staticmethod
    def _advance(current: GrantState, target: GrantState) -> GrantState:
        logger.debug(
            f"Password grant: {current.value} -> {target.value}",
            extra={"trace_point": "password_grant_state", "state": target.value},
        )
        return target
