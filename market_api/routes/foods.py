"""routes/foods.py – Food catalogue endpoints.

Public:
  GET    /foods?page&size       → danh sách phân trang
  GET    /foods/user/{email}    → food gắn với buyer email
  GET    /count/foods           → tổng số food
  GET    /foods/{id}            → 1 food
  GET    /top/foods             → top 6 theo order_count
Cần login (cookie `token`):
  POST   /foods                 → tạo food
  PATCH  /foods/{id}            → sửa 1 phần (chỉ người bán)
  DELETE /foods/{id}            → xoá (chỉ người bán)
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.auth import Identity
from ..core.errors import ForbiddenError, NotFoundError
from ..deps import get_food_service, require_user
from ..models import (
    CountResponse,
    DeleteResponse,
    FoodCreate,
    FoodItem,
    FoodUpdate,
    InsertResponse,
    UpdateResponse,
)

router = APIRouter(tags=["Foods"])
logger = logging.getLogger(__name__)


# ── Read ──────────────────────────────────────────────────────────────────────

@router.get("/foods", response_model=list[FoodItem])
async def list_foods(
    page: int = Query(default=1, ge=1, description="Trang (1-based)"),
    size: int = Query(default=10, ge=1, le=100, description="Số food mỗi trang"),
):
    try:
        return await get_food_service().list_page(page, size)
    except Exception as e:
        logger.exception("list_foods failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/foods/user/{email}", response_model=list[FoodItem])
async def foods_by_buyer(email: str):
    try:
        return await get_food_service().list_by_buyer(email)
    except Exception as e:
        logger.exception("foods_by_buyer failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/count/foods", response_model=CountResponse)
async def count_foods():
    try:
        return CountResponse(count=await get_food_service().count())
    except Exception as e:
        logger.exception("count_foods failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/foods/{food_id}", response_model=FoodItem)
async def get_food(food_id: int):
    try:
        return await get_food_service().get(food_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("get_food failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/top/foods", response_model=list[FoodItem])
async def top_foods():
    """6 food có **order_count** cao nhất."""
    try:
        return await get_food_service().top()
    except Exception as e:
        logger.exception("top_foods failed")
        raise HTTPException(status_code=500, detail=str(e))


# ── Write (auth) ──────────────────────────────────────────────────────────────

@router.post("/foods", response_model=InsertResponse)
async def create_food(req: FoodCreate, user: Identity = Depends(require_user)):
    try:
        food_id = await get_food_service().create(req, user)
        return InsertResponse(inserted_id=food_id)
    except ForbiddenError:
        raise HTTPException(status_code=403, detail="forbidden access")
    except Exception as e:
        logger.exception("create_food failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/foods/{food_id}", response_model=UpdateResponse)
async def update_food(food_id: int, req: FoodUpdate, user: Identity = Depends(require_user)):
    try:
        matched, modified = await get_food_service().update(food_id, req, user)
        return UpdateResponse(matched_count=matched, modified_count=modified)
    except ForbiddenError:
        raise HTTPException(status_code=403, detail="forbidden access")
    except Exception as e:
        logger.exception("update_food failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/foods/{food_id}", response_model=DeleteResponse)
async def delete_food(food_id: int, user: Identity = Depends(require_user)):
    try:
        return DeleteResponse(deleted_count=await get_food_service().delete(food_id, user))
    except ForbiddenError:
        raise HTTPException(status_code=403, detail="forbidden access")
    except Exception as e:
        logger.exception("delete_food failed")
        raise HTTPException(status_code=500, detail=str(e))
