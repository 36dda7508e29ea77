"""Security event port"""

from abc import ABC, abstractmethod

from oauth_grant.schemas.oauth import TokenRequest

CLIENT_AUTHENTICATION_FAILED = "client.authentication.failed"
USER_AUTHENTICATION_FAILED = "user.authentication.failed"


class SecurityEventNotifier(ABC):
    """Sink for security events raised while handling token requests"""

    @abstractmethod
    def notify(self, event_name: str, context: TokenRequest) -> None:
        """
        Deliver an event.

        Args:
            event_name: Event name, e.g. ``client.authentication.failed``
            context: The token request that triggered the event
        """
