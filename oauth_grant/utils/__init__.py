"""Utility modules"""

from oauth_grant.utils.crypto import SecureKeyGenerator, generate_secret
from oauth_grant.utils.dates import add_months, utc_now

__all__ = [
    "generate_secret",
    "SecureKeyGenerator",
    "add_months",
    "utc_now",
]
