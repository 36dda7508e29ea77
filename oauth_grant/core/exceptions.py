"""OAuth2 server errors"""

from oauth_grant.schemas.oauth import TokenErrorResponse


class OAuthServerException(Exception):
    """
    Terminal error of a token request

    Carries the OAuth2 error code, a user-facing message, the HTTP status to
    answer with and an optional hint. Never carries internal details.
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        http_status: int = 400,
        hint: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.http_status = http_status
        self.hint = hint

    def to_response(self) -> TokenErrorResponse:
        """Build the OAuth2 error payload"""
        return TokenErrorResponse(
            error=self.error_type,
            error_description=self.message,
            hint=self.hint,
        )

    def http_headers(self) -> dict[str, str]:
        """Extra headers for the error response"""
        return {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(error_type={self.error_type!r}, hint={self.hint!r})"


class InvalidRequestError(OAuthServerException):
    """A required parameter is missing"""

    def __init__(self, parameter: str):
        super().__init__(
            "The request is missing a required parameter, includes an invalid parameter value, "
            "includes a parameter more than once, or is otherwise malformed.",
            "invalid_request",
            http_status=400,
            hint=f"`{parameter}` parameter is missing",
        )
        self.parameter = parameter


class InvalidClientError(OAuthServerException):
    """Client authentication failed"""

    def __init__(self):
        super().__init__("Client authentication failed", "invalid_client", http_status=401)

    def http_headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": 'Basic realm="OAuth"'}


class InvalidCredentialsError(OAuthServerException):
    """Resource owner credentials were rejected (no reason is given on purpose)"""

    def __init__(self):
        super().__init__(
            "The user credentials were incorrect.",
            "invalid_credentials",
            http_status=401,
        )


class InvalidScopeError(OAuthServerException):
    """A requested scope is unknown or not allowed for the client"""

    def __init__(self, scope: str):
        super().__init__(
            "The requested scope is invalid, unknown, or malformed",
            "invalid_scope",
            http_status=400,
            hint=f"Check the `{scope}` scope",
        )
        self.scope = scope


class UnsupportedGrantTypeError(OAuthServerException):
    """No enabled grant handles the request"""

    def __init__(self):
        super().__init__(
            "The authorization grant type is not supported by the authorization server.",
            "unsupported_grant_type",
            http_status=400,
            hint="Check the `grant_type` parameter",
        )
