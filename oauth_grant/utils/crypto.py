"""Cryptography utilities"""

import secrets

from oauth_grant.core.config import settings
from oauth_grant.ports.token_generator import TokenGenerator


def generate_secret(length: int = 32) -> str:
    """
    Generate a cryptographically secure random secret

    Args:
        length: Length of the secret in bytes

    Returns:
        Hexadecimal secret string
    """
    return secrets.token_hex(length)


class SecureKeyGenerator(TokenGenerator):
    """Token generator backed by the operating system CSPRNG"""

    def __init__(self, length: int | None = None):
        self.length = length if length is not None else settings.token_identifier_bytes

    def new_identifier(self) -> str:
        return generate_secret(self.length)
