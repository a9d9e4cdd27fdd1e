"""
main.py – FastAPI app entry point (slim wire-up only).
Chỉ kết nối routes, CORS và lifespan. Không chứa business logic.
"""
import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv
load_dotenv()

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import auth, foods, orders, system
from .deps import get_db, get_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Creating tables…")
    get_db().create_all()
    logger.info("✅ Ready.")
    yield
    get_db().dispose()
    logger.info("Shutdown.")


app = FastAPI(
    title="Restaurant Marketplace API",
    description="Food listings + orders cho restaurant marketplace, xác thực bằng cookie JWT.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(auth.router)
app.include_router(foods.router)
app.include_router(orders.router)


if __name__ == "__main__":
    uvicorn.run("market_api.main:app", host="0.0.0.0", port=get_settings().port)
