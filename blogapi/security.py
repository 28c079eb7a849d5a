from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_401_UNAUTHORIZED

from blogapi.services.token_service import TokenService
from blogapi.settings import Settings, settings

AUTH_HEADER_NAME = "Authorization"
auth_header = APIKeyHeader(name=AUTH_HEADER_NAME, auto_error=False)


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_token_service(current_settings: Settings = Depends(get_settings)):
    return TokenService(current_settings)


def require_bearer_token(
    auth_header: str = Security(auth_header),
    token_service: TokenService = Depends(get_token_service),
):
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )
    if not token_service.validate(auth_header):
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return auth_header
