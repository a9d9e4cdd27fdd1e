"""
core/auth.py – TokenService class.
Trách nhiệm: ký và kiểm tra session token (JWT HS256), kiểm tra quyền sở hữu.
Không đụng tới Request/Response – phần cookie nằm ở deps.py và routes/auth.py.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from .errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

ALGORITHM   = "HS256"
COOKIE_NAME = "token"


@dataclass(frozen=True)
class Identity:
    email: str
    claims: dict[str, Any] = field(default_factory=dict)


class TokenService:
    """Phát hành và giải mã token chứa claim `email`."""

    def __init__(self, secret: str, ttl_seconds: int = 3600) -> None:
        self._secret = secret
        self.ttl_seconds = ttl_seconds

    def issue(self, payload: dict[str, Any], ttl: Optional[timedelta] = None) -> str:
        """Ký payload login, thêm `iat` và `exp`."""
        if not payload.get("email"):
            raise ValueError("Token payload must contain an email claim")
        now = datetime.now(timezone.utc)
        claims = {
            **payload,
            "iat": now,
            "exp": now + (ttl if ttl is not None else timedelta(seconds=self.ttl_seconds)),
        }
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> Identity:
        """Giải mã token. Raise UnauthorizedError nếu thiếu/sai/hết hạn."""
        if not token:
            raise UnauthorizedError("missing token")
        try:
            claims = jwt.decode(
                token, self._secret, algorithms=[ALGORITHM],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("Rejected expired token")
            raise UnauthorizedError("token expired") from e
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected invalid token: {type(e).__name__}")
            raise UnauthorizedError("invalid token") from e

        email = claims.get("email")
        if not isinstance(email, str) or not email:
            raise UnauthorizedError("token has no email claim")
        return Identity(email=email, claims=claims)


def ensure_owner(identity: Identity, email: Optional[str]) -> None:
    """Identity phải trùng email của dữ liệu được truy cập."""
    if email is None or identity.email != email:
        raise ForbiddenError(f"{identity.email} cannot access data of {email}")
