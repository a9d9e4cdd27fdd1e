"""
core/config.py – Settings đọc từ biến môi trường (.env được load ở main.py).
"""
import logging
import os
import secrets
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./market.db"
DEFAULT_CORS_ORIGIN  = "http://localhost:5173"


@dataclass(frozen=True)
class Settings:
    database_url: str
    token_secret: str
    token_ttl_seconds: int = 3600
    port: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: [DEFAULT_CORS_ORIGIN])

    @classmethod
    def from_env(cls) -> "Settings":
        secret = os.getenv("TOKEN_SECRET", "")
        if not secret:
            # Token sẽ mất hiệu lực sau mỗi lần restart
            logger.warning("TOKEN_SECRET not set – using a random per-process secret")
            secret = secrets.token_hex(32)
        origins = os.getenv("CORS_ORIGIN", DEFAULT_CORS_ORIGIN)
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            token_secret=secret,
            token_ttl_seconds=int(os.getenv("TOKEN_TTL_SECONDS", "3600")),
            port=int(os.getenv("PORT", "5000")),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )
