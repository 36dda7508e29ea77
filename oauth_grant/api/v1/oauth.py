"""OAuth2 endpoints"""

from datetime import timedelta

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from oauth_grant.core.config import logger, settings
from oauth_grant.core.dependencies import PasswordGrantDep
from oauth_grant.core.exceptions import OAuthServerException, UnsupportedGrantTypeError
from oauth_grant.schemas.oauth import TokenErrorResponse, TokenRequest, TokenResponse

router = APIRouter()

basic_auth = HTTPBasic(auto_error=False)

NO_STORE_HEADERS = {"Cache-Control": "no-store", "Pragma": "no-cache"}


@router.post("/token", response_model=TokenResponse)
def token_endpoint(
    request: Request,
    grant: PasswordGrantDep,
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
    grant_type: str | None = Form(None),
    client_id: str | None = Form(None),
    client_secret: str | None = Form(None),
    username: str | None = Form(None),
    password: str | None = Form(None),
    scope: str | None = Form(None),
):
    """
    OAuth2 Token Endpoint

    Supports the password grant: client credentials (form or HTTP Basic) plus
    username and password are exchanged for an access token and a refresh token.

    Returns:
        TokenResponse, or an OAuth2 error response
    """
    token_request = TokenRequest(
        grant_type=grant_type,
        client_id=client_id,
        client_secret=client_secret,
        username=username,
        password=password,
        scope=scope,
        basic_auth_user=credentials.username if credentials else None,
        basic_auth_password=credentials.password if credentials else None,
    )

    ip_address = request.client.host if request.client else "unknown"
    logger.info(
        f"Token endpoint called: grant_type={grant_type}, ip={ip_address}",
        extra={
            "trace_point": "token_endpoint_start",
            "grant_type": grant_type,
            "client_id": client_id,
            "ip_address": ip_address,
            "has_basic_auth": credentials is not None,
        },
    )

    try:
        if not grant.can_handle(token_request):
            raise UnsupportedGrantTypeError()

        tokens = grant.respond_to_request(
            token_request,
            timedelta(seconds=settings.access_token_lifetime),
            settings.scope_delimiter,
        )

    except OAuthServerException as e:
        logger.warning(
            f"Token request rejected: {e.error_type}",
            extra={
                "trace_point": "token_endpoint_rejected",
                "error": e.error_type,
                "ip_address": ip_address,
            },
        )
        return _error_response(e.to_response(), e.http_status, e.http_headers())

    except Exception as e:
        logger.error(
            f"Token endpoint error: {e}",
            exc_info=True,
            extra={
                "trace_point": "token_endpoint_error",
                "error_type": type(e).__name__,
                "grant_type": grant_type,
                "client_id": client_id,
            },
        )
        return _error_response(
            TokenErrorResponse(
                error="server_error",
                error_description="An internal error occurred",
            ),
            500,
        )

    token_response = TokenResponse.from_issued_tokens(tokens, settings.scope_delimiter)

    return JSONResponse(
        content=token_response.model_dump(),
        status_code=200,
        headers=NO_STORE_HEADERS,
    )


def _error_response(
    error_response: TokenErrorResponse,
    status_code: int = 400,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """
    Create OAuth2 error response

    Args:
        error_response: OAuth2 error payload
        status_code: HTTP status code
        headers: Extra response headers

    Returns:
        JSONResponse with error
    """
    return JSONResponse(
        content=error_response.model_dump(exclude_none=True),
        status_code=status_code,
        headers={**NO_STORE_HEADERS, **(headers or {})},
    )
