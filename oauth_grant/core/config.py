"""Application configuration"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="OAUTH_GRANT__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"

    # Token issuance
    access_token_lifetime: int = 3600  # 1 hour
    scope_delimiter: str = " "
    token_identifier_bytes: int = 20  # 40 hex characters

    # Resource owner credentials may fall back to the Basic-auth user field
    allow_basic_auth_user_credentials: bool = True

    # Logging
    log_level: str = "INFO"

    # Version
    version: str = "0.1.0"

    @property
    def is_development(self) -> bool:
        """Check if running in development"""
        return self.environment.lower() == "development"


# Create settings instance
settings = Settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger("oauth-grant")
