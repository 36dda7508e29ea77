"""Resource owner authentication"""

from oauth_grant.core.config import logger
from oauth_grant.core.exceptions import InvalidCredentialsError
from oauth_grant.ports.events import USER_AUTHENTICATION_FAILED, SecurityEventNotifier
from oauth_grant.ports.repositories import UserRepository
from oauth_grant.schemas.oauth import TokenRequest
from oauth_grant.schemas.user import User
from oauth_grant.services.event_notifier import emit_security_event


class ResourceOwnerAuthenticator:
    """Validates username and password against the user directory"""

    def __init__(self, user_repository: UserRepository, notifier: SecurityEventNotifier):
        self.user_repository = user_repository
        self.notifier = notifier

    def authenticate(self, request: TokenRequest, username: str, password: str) -> User:
        """
        Authenticate the resource owner

        The failure is the same whether the user is unknown or the password
        is wrong.

        Raises:
            InvalidCredentialsError: Credentials were rejected
        """
        user = self.user_repository.get_user_by_credentials(username, password)

        if user is None:
            logger.warning(
                "User authentication failed",
                extra={"trace_point": "user_auth_failed", "username": username},
            )
            emit_security_event(self.notifier, USER_AUTHENTICATION_FAILED, request)
            raise InvalidCredentialsError()

        return user
