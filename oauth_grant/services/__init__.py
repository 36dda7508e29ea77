"""Service modules"""

from oauth_grant.services.client_authenticator import ClientAuthenticator
from oauth_grant.services.credential_extractor import (
    extract_client_credentials,
    extract_user_credentials,
)
from oauth_grant.services.event_notifier import LoggingSecurityEventNotifier, emit_security_event
from oauth_grant.services.password_grant import GrantState, PasswordGrant
from oauth_grant.services.scope_resolver import ScopeResolver, split_scopes
from oauth_grant.services.token_issuer import TokenIssuer
from oauth_grant.services.user_authenticator import ResourceOwnerAuthenticator

__all__ = [
    "extract_client_credentials",
    "extract_user_credentials",
    "ClientAuthenticator",
    "ResourceOwnerAuthenticator",
    "ScopeResolver",
    "split_scopes",
    "TokenIssuer",
    "LoggingSecurityEventNotifier",
    "emit_security_event",
    "GrantState",
    "PasswordGrant",
]
