"""routes/system.py – /, /health"""
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["System"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Restaurant website is running"


@router.get("/health")
async def health():
    return {"status": "ok", "time": datetime.now().isoformat()}
