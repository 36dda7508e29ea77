"""Scope validation"""

from oauth_grant.core.config import logger
from oauth_grant.core.exceptions import InvalidScopeError
from oauth_grant.ports.repositories import ScopeRepository
from oauth_grant.schemas.oauth import Client, Scope


def split_scopes(scope_string: str, delimiter: str = " ") -> list[str]:
    """
    Split a scope string into identifiers

    Empty segments are dropped and duplicates removed, keeping the order in
    which scopes were first requested. Deduplication happens here rather than
    in the scope repository, so a repeated scope is looked up once and never
    granted twice whatever the repository does.
    """
    identifiers: list[str] = []
    for identifier in scope_string.strip().split(delimiter):
        identifier = identifier.strip()
        if identifier and identifier not in identifiers:
            identifiers.append(identifier)
    return identifiers


class ScopeResolver:
    """Resolves requested scopes against the scope directory and the client"""

    def __init__(self, scope_repository: ScopeRepository):
        self.scope_repository = scope_repository

    def resolve(
        self,
        scope_string: str,
        delimiter: str,
        client: Client,
        grant_type: str,
    ) -> list[Scope]:
        """
        Validate and resolve requested scopes

        Args:
            scope_string: Requested scopes
            delimiter: Scope delimiter
            client: Authenticated client
            grant_type: Grant type requesting the scopes

        Returns:
            Ordered list of resolved scopes

        Raises:
            InvalidScopeError: A scope is unknown or not allowed for the client
        """
        identifiers = split_scopes(scope_string, delimiter)

        if not identifiers:
            scopes = self.scope_repository.get_default_scopes(grant_type, client)
        else:
            scopes = []
            for identifier in identifiers:
                scope = self.scope_repository.get_scope(identifier, grant_type, client.identifier)
                if scope is None:
                    logger.warning(
                        f"Unknown scope requested: {identifier} for client {client.identifier}"
                    )
                    raise InvalidScopeError(identifier)
                scopes.append(scope)

        for scope in scopes:
            if not client.allows_scope(scope.identifier):
                logger.warning(
                    f"Scope not allowed: {scope.identifier} for client {client.identifier}"
                )
                raise InvalidScopeError(scope.identifier)

        return list(scopes)
