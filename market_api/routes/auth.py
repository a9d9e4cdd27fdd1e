"""routes/auth.py – POST /jwt, POST /logout"""
import logging

from fastapi import APIRouter, HTTPException, Response

from ..core.auth import COOKIE_NAME
from ..deps import get_tokens
from ..models import SuccessResponse, TokenRequest

router = APIRouter(tags=["Auth"])
logger = logging.getLogger(__name__)


@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(req: TokenRequest, response: Response):
    """Ký token từ payload login và set vào cookie httponly (hết hạn sau TTL)."""
    tokens = get_tokens()
    try:
        token = tokens.issue(req.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.set_cookie(
        COOKIE_NAME, token,
        max_age=tokens.ttl_seconds,
        httponly=True, secure=True, samesite="none",
    )
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    logger.info("Logging out")
    response.delete_cookie(COOKIE_NAME, httponly=True, secure=True, samesite="none")
    return SuccessResponse()
