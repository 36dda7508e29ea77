"""Credential extraction for the password grant"""

from oauth_grant.core.exceptions import InvalidRequestError
from oauth_grant.schemas.oauth import ClientCredentials, TokenRequest, UserCredentials


def _first_present(body_value: str | None, fallback: str | None) -> str | None:
    """Body value wins; the transport-level value is used only when the body lacks it"""
    return body_value if body_value is not None else fallback


def _require(value: str | None, parameter: str) -> str:
    if value is None:
        raise InvalidRequestError(parameter)
    return value


def extract_client_credentials(request: TokenRequest) -> ClientCredentials:
    """
    Resolve client credentials from a token request

    Client id and secret fall back to the Basic-auth user and password.

    Raises:
        InvalidRequestError: client_id or client_secret is missing
    """
    client_id = _require(
        _first_present(request.client_id, request.basic_auth_user),
        "client_id",
    )
    client_secret = _require(
        _first_present(request.client_secret, request.basic_auth_password),
        "client_secret",
    )
    return ClientCredentials(client_id=client_id, client_secret=client_secret)


def extract_user_credentials(
    request: TokenRequest,
    allow_basic_auth_user_credentials: bool = True,
) -> UserCredentials:
    """
    Resolve resource owner credentials from a token request

    Username and password both fall back to the Basic-auth *user* field.
    That mirrors the behaviour this grant has always had; the password
    fallback is almost certainly unintended, so it can be switched off with
    ``allow_basic_auth_user_credentials=False``.

    Only called once the client is authenticated, so a rejected client is
    reported before any missing user field.

    Args:
        request: Token request from the transport layer
        allow_basic_auth_user_credentials: Allow Basic-auth fallback for username/password

    Returns:
        UserCredentials

    Raises:
        InvalidRequestError: username or password is missing
    """
    user_fallback = request.basic_auth_user if allow_basic_auth_user_credentials else None
    username = _require(_first_present(request.username, user_fallback), "username")
    password = _require(_first_present(request.password, user_fallback), "password")
    return UserCredentials(username=username, password=password)
