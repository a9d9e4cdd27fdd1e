"""
deps.py – Dependency Injection: singleton service instances + Auth Gate.
Khởi tạo 1 lần duy nhất khi server start; Database được truyền vào từng service.
"""
from typing import Optional

from fastapi import Cookie, HTTPException

from .core.auth import COOKIE_NAME, Identity, TokenService
from .core.config import Settings
from .core.errors import UnauthorizedError
from .core.foods import FoodService
from .core.orders import OrderService
from .db.session import Database

# ── Core singletons ────────────────────────────────────────────────────────────

_settings = Settings.from_env()
_db       = Database(_settings.database_url)
_tokens   = TokenService(_settings.token_secret, _settings.token_ttl_seconds)
_foods    = FoodService(_db)
_orders   = OrderService(_db)


# ── Getters (dùng trong routes) ────────────────────────────────────────────────

def get_settings()      -> Settings:      return _settings
def get_db()            -> Database:      return _db
def get_tokens()        -> TokenService:  return _tokens
def get_food_service()  -> FoodService:   return _foods
def get_order_service() -> OrderService:  return _orders


# ── Auth Gate ──────────────────────────────────────────────────────────────────

def require_user(token: Optional[str] = Cookie(default=None, alias=COOKIE_NAME)) -> Identity:
    """Dependency cho route cần login: đọc cookie `token`, trả về Identity hoặc 401."""
    try:
        return get_tokens().verify(token)
    except UnauthorizedError:
        raise HTTPException(status_code=401, detail="unauthorized access")
