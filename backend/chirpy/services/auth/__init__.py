from chirpy.services.auth.dto import (
    AccessTokenClaims,
    AuthTokenConfig,
    LoginIn,
    LoginOut,
    RefreshTokenCheck,
)
from chirpy.services.auth.service import AuthorizationService

__all__ = [
    "AccessTokenClaims",
    "AuthTokenConfig",
    "AuthorizationService",
    "LoginIn",
    "LoginOut",
    "RefreshTokenCheck",
]
