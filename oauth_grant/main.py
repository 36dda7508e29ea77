"""FastAPI application factory"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from oauth_grant.core.config import logger, settings
from oauth_grant.services.password_grant import PasswordGrant


def create_app(password_grant: PasswordGrant) -> FastAPI:
    """
    Create the token endpoint application

    Args:
        password_grant: Grant wired to the hosting application's collaborators
            (see ``oauth_grant.core.dependencies.build_password_grant``)

    Returns:
        FastAPI application
    """
    from oauth_grant.api.v1 import oauth

    app = FastAPI(
        title="OAuth Password Grant",
        description="OAuth2 resource owner password credentials grant",
        version=settings.version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )
    app.state.password_grant = password_grant

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return JSONResponse(
            content={
                "status": "healthy",
                "version": settings.version,
                "environment": settings.environment,
            }
        )

    app.include_router(oauth.router, prefix="/oauth", tags=["OAuth2"])

    logger.info(f"Token endpoint ready (environment: {settings.environment})")
    return app
