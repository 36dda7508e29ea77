"""Client authentication"""

from oauth_grant.core.config import logger
from oauth_grant.core.exceptions import InvalidClientError
from oauth_grant.ports.events import CLIENT_AUTHENTICATION_FAILED, SecurityEventNotifier
from oauth_grant.ports.repositories import ClientRepository
from oauth_grant.schemas.oauth import Client, TokenRequest
from oauth_grant.services.event_notifier import emit_security_event


class ClientAuthenticator:
    """Validates client credentials against the client directory"""

    def __init__(self, client_repository: ClientRepository, notifier: SecurityEventNotifier):
        self.client_repository = client_repository
        self.notifier = notifier

    def authenticate(
        self,
        request: TokenRequest,
        client_id: str,
        client_secret: str,
        grant_type: str,
    ) -> Client:
        """
        Authenticate a client for a grant type

        Args:
            request: Incoming token request (event context)
            client_id: Client ID
            client_secret: Client secret
            grant_type: Grant type the client authenticates for

        Returns:
            Authenticated client

        Raises:
            InvalidClientError: Unknown client, wrong secret or grant not allowed
        """
        # Grants handled here never use redirect URIs
        client = self.client_repository.get_client(client_id, client_secret, None, grant_type)

        if client is None:
            logger.warning(
                f"Client authentication failed: {client_id}",
                extra={"trace_point": "client_auth_failed", "client_id": client_id},
            )
            emit_security_event(self.notifier, CLIENT_AUTHENTICATION_FAILED, request)
            raise InvalidClientError()

        logger.debug(f"Client validated: {client_id}")
        return client
