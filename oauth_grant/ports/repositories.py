"""
Repository ports consumed by the password grant.

Storage lives outside this package: implementations are supplied by the
hosting application and injected into the services.
"""

from abc import ABC, abstractmethod

from oauth_grant.schemas.oauth import Client, Scope
from oauth_grant.schemas.token import AccessToken, RefreshToken
from oauth_grant.schemas.user import User


class ClientRepository(ABC):
    """Client directory"""

    @abstractmethod
    def get_client(
        self,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str | None,
        grant_type: str,
    ) -> Client | None:
        """
        Get a client by its credentials.

        Args:
            client_id: Client identifier
            client_secret: Client secret
            redirect_uri: Redirect URI (None for grants without redirects)
            grant_type: Grant type the client is authenticating for

        Returns:
            Client if the credentials are valid for the grant type, None otherwise
        """


class UserRepository(ABC):
    """User directory; owns password hashing and verification"""

    @abstractmethod
    def get_user_by_credentials(self, username: str, password: str) -> User | None:
        """
        Get a user by username and password.

        Returns:
            User if the credentials are valid, None otherwise
        """


class ScopeRepository(ABC):
    """Scope directory"""

    @abstractmethod
    def get_scope(self, identifier: str, grant_type: str, client_id: str) -> Scope | None:
        """
        Get a scope by identifier.

        Args:
            identifier: Scope identifier
            grant_type: Grant type requesting the scope
            client_id: Identifier of the requesting client

        Returns:
            Scope if known, None otherwise
        """

    def get_default_scopes(self, grant_type: str, client: Client) -> list[Scope]:
        """Scopes granted when the request names none"""
        return []


class AccessTokenRepository(ABC):
    """Access token store"""

    @abstractmethod
    def persist_new_access_token(self, access_token: AccessToken) -> None:
        """
        Persist a newly issued access token.

        Raises:
            Exception: Any storage failure, including an identifier collision
        """


class RefreshTokenRepository(ABC):
    """Refresh token store"""

    @abstractmethod
    def persist_new_refresh_token(self, refresh_token: RefreshToken) -> None:
        """
        Persist a newly issued refresh token.

        Raises:
            Exception: Any storage failure, including an identifier collision
        """
