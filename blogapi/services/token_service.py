import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from blogapi.exceptions import ConfigError, Unauthorized
from blogapi.settings import Settings

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer "


class TokenService:
    """Issues and checks the HS256 bearer tokens that gate write routes."""

    def __init__(self, settings: Settings):
        self.secret = settings.USER_SECRET_KEY
        self.audience = settings.TOKEN_AUDIENCE
        self.issuer = settings.TOKEN_ISSUER
        self.display_name = settings.TOKEN_DISPLAY_NAME
        self.ttl = timedelta(minutes=settings.TOKEN_TTL_MINUTES)
        self.issue_policy = settings.TOKEN_ISSUE_POLICY

    def issue(self, candidate_secret: str) -> str:
        if not self.secret:
            logger.error("USER_SECRET_KEY is not configured")
            raise ConfigError("USER_SECRET_KEY is required to issue tokens")

        if not hmac.compare_digest(
            (candidate_secret or "").encode(), self.secret.encode()
        ):
            if self.issue_policy == "reject":
                logger.warning("Token requested with an invalid secret, rejecting")
                raise Unauthorized("Invalid secret")
            logger.warning("Token requested with an invalid secret, issuing anyway")

        expiry = datetime.now(timezone.utc) + self.ttl
        payload = {
            "name": self.display_name,
            "exp": int(expiry.timestamp()),
            "aud": self.audience,
            "iss": self.issuer,
        }
        return jwt.encode(payload, self.secret, algorithm=JWT_ALGORITHM)

    def validate(self, bearer_header: Optional[str]) -> bool:
        if not bearer_header or not bearer_header.startswith(BEARER_PREFIX):
            return False
        if not self.secret:
            logger.warning("USER_SECRET_KEY is not configured, rejecting bearer token")
            return False

        token = bearer_header[len(BEARER_PREFIX) :].strip()
        try:
            # audience is compared below so an empty configured audience still works
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp"], "verify_aud": False},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired bearer token")
            return False
        except jwt.PyJWTError as e:
            logger.warning(f"Rejected bearer token: {e}")
            return False

        if claims.get("aud") != self.audience:
            logger.warning(f"Rejected bearer token for audience {claims.get('aud')!r}")
            return False
        return True
