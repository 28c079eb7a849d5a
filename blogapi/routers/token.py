import logging

from fastapi import APIRouter, Depends, HTTPException

from blogapi.exceptions import ConfigError, Unauthorized
from blogapi.schemas.blog import TokenRequest, TokenResponse
from blogapi.security import get_token_service
from blogapi.services.token_service import TokenService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
def generate_token(
    body: TokenRequest,
    token_service: TokenService = Depends(get_token_service),
):
    """Exchange the shared secret for a short-lived bearer token."""
    try:
        return TokenResponse(token=token_service.issue(body.secretKey))
    except Unauthorized:
        raise HTTPException(status_code=401, detail="Invalid secret")
    except ConfigError as e:
        logger.error(f"Cannot issue token: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate token")
    except Exception as e:
        logger.error(f"Unexpected error generating token: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate token")
