"""Service wiring and FastAPI dependencies"""

from datetime import datetime
from typing import Annotated, Callable

from fastapi import Depends, Request

from oauth_grant.core.config import settings
from oauth_grant.ports.events import SecurityEventNotifier
from oauth_grant.ports.repositories import (
    AccessTokenRepository,
    ClientRepository,
    RefreshTokenRepository,
    ScopeRepository,
    UserRepository,
)
from oauth_grant.ports.token_generator import TokenGenerator
from oauth_grant.services.client_authenticator import ClientAuthenticator
from oauth_grant.services.event_notifier import LoggingSecurityEventNotifier
from oauth_grant.services.password_grant import PasswordGrant
from oauth_grant.services.scope_resolver import ScopeResolver
from oauth_grant.services.token_issuer import TokenIssuer
from oauth_grant.services.user_authenticator import ResourceOwnerAuthenticator
from oauth_grant.utils.crypto import SecureKeyGenerator
from oauth_grant.utils.dates import utc_now


def build_password_grant(
    client_repository: ClientRepository,
    user_repository: UserRepository,
    scope_repository: ScopeRepository,
    access_token_repository: AccessTokenRepository,
    refresh_token_repository: RefreshTokenRepository,
    notifier: SecurityEventNotifier | None = None,
    token_generator: TokenGenerator | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> PasswordGrant:
    """
    Assemble a password grant from its collaborators

    Args:
        client_repository: Client directory
        user_repository: User directory
        scope_repository: Scope directory
        access_token_repository: Access token store
        refresh_token_repository: Refresh token store
        notifier: Security event sink (default: application log)
        token_generator: Identifier generator (default: CSPRNG)
        clock: Time source

    Returns:
        Ready-to-use PasswordGrant
    """
    notifier = notifier or LoggingSecurityEventNotifier()
    token_generator = token_generator or SecureKeyGenerator()

    return PasswordGrant(
        client_authenticator=ClientAuthenticator(client_repository, notifier),
        user_authenticator=ResourceOwnerAuthenticator(user_repository, notifier),
        scope_resolver=ScopeResolver(scope_repository),
        token_issuer=TokenIssuer(
            access_token_repository,
            refresh_token_repository,
            token_generator,
            clock=clock,
        ),
        allow_basic_auth_user_credentials=settings.allow_basic_auth_user_credentials,
    )


def get_password_grant(request: Request) -> PasswordGrant:
    """Get the password grant configured on the application"""
    return request.app.state.password_grant


# Type annotations for services
PasswordGrantDep = Annotated[PasswordGrant, Depends(get_password_grant)]
