"""Security event delivery"""

from oauth_grant.core.config import logger
from oauth_grant.ports.events import SecurityEventNotifier
from oauth_grant.schemas.oauth import TokenRequest


class LoggingSecurityEventNotifier(SecurityEventNotifier):
    """Writes security events to the application log"""

    def notify(self, event_name: str, context: TokenRequest) -> None:
        logger.warning(
            f"Audit: {event_name}",
            extra={
                "event_type": event_name,
                "grant_type": context.grant_type,
                "client_id": context.client_id or context.basic_auth_user,
                "username": context.username,
            },
        )


def emit_security_event(
    notifier: SecurityEventNotifier,
    event_name: str,
    context: TokenRequest,
) -> None:
    """
    Fire-and-forget delivery of a security event

    A failing notifier is logged and otherwise ignored: auditing must never
    change the outcome of a token request.
    """
    try:
        notifier.notify(event_name, context)
    except Exception as e:
        logger.error(
            f"Security event delivery failed: {event_name}",
            exc_info=True,
            extra={"event_type": event_name, "error_type": type(e).__name__},
        )
