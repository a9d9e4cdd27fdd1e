"""
core/foods.py – FoodService class.
Trách nhiệm: đọc/ghi danh mục food (list, phân trang, top, CRUD của người bán).

Blocking calls được wrap trong run_in_executor để không block event loop.
"""
import asyncio
import logging
from typing import Any

from sqlalchemy import func

from ..db.models import Food
from ..db.session import Database
from ..models import FoodCreate, FoodItem, FoodUpdate
from .auth import Identity, ensure_owner
from .errors import NotFoundError

logger = logging.getLogger(__name__)

TOP_FOODS_LIMIT = 6


class FoodService:
    """CRUD + truy vấn danh mục trên bảng `foods`."""

    def __init__(self, db: Database) -> None:
        self._db = db

    # ── Public: Read ───────────────────────────────────────────────────────────

    async def list_page(self, page: int = 1, size: int = 10) -> list[FoodItem]:
        """Trang `page` (1-based), mỗi trang `size` food."""
        return await self._run(self._fetch_page, max(page, 1), max(size, 1))

    async def list_by_buyer(self, email: str) -> list[FoodItem]:
        return await self._run(self._fetch_by_buyer, email)

    async def count(self) -> int:
        return await self._run(self._count)

    async def get(self, food_id: int) -> FoodItem:
        return await self._run(self._fetch_one, food_id)

    async def top(self, limit: int = TOP_FOODS_LIMIT) -> list[FoodItem]:
        """Food được đặt nhiều nhất (order_count giảm dần)."""
        return await self._run(self._fetch_top, limit)

    # ── Public: Write ──────────────────────────────────────────────────────────

    async def create(self, data: FoodCreate, seller: Identity) -> int:
        return await self._run(self._do_create, data, seller)

    async def update(self, food_id: int, patch: FoodUpdate, caller: Identity) -> tuple[int, int]:
        """Trả về (matched_count, modified_count)."""
        return await self._run(self._do_update, food_id, patch, caller)

    async def delete(self, food_id: int, caller: Identity) -> int:
        return await self._run(self._do_delete, food_id, caller)

    # ── Private: ORM ───────────────────────────────────────────────────────────

    async def _run(self, fn, *args) -> Any:
        return await asyncio.get_event_loop().run_in_executor(None, fn, *args)

    def _fetch_page(self, page: int, size: int) -> list[FoodItem]:
        with self._db.session() as session:
            rows = (
                session.query(Food)
                .order_by(Food.id)
                .offset((page - 1) * size)
                .limit(size)
                .all()
            )
        return [FoodItem.model_validate(r) for r in rows]

    def _fetch_by_buyer(self, email: str) -> list[FoodItem]:
        with self._db.session() as session:
            rows = session.query(Food).filter(Food.buyer_email == email).order_by(Food.id).all()
        return [FoodItem.model_validate(r) for r in rows]

    def _count(self) -> int:
        with self._db.session() as session:
            return session.query(func.count(Food.id)).scalar() or 0

    def _fetch_one(self, food_id: int) -> FoodItem:
        with self._db.session() as session:
            food = session.get(Food, food_id)
            if food is None:
                raise NotFoundError(f"Food id={food_id} not found")
            return FoodItem.model_validate(food)

    def _fetch_top(self, limit: int) -> list[FoodItem]:
        with self._db.session() as session:
            rows = (
                session.query(Food)
                .order_by(Food.order_count.desc(), Food.id)
                .limit(limit)
                .all()
            )
        return [FoodItem.model_validate(r) for r in rows]

    def _do_create(self, data: FoodCreate, seller: Identity) -> int:
        values = data.model_dump()
        values["seller_email"] = values.get("seller_email") or seller.email
        ensure_owner(seller, values["seller_email"])
        with self._db.session() as session:
            food = Food(**values, order_count=0)
            session.add(food)
            session.flush()
            logger.info(f"Food created id={food.id} by {seller.email}")
            return food.id

    def _do_update(self, food_id: int, patch: FoodUpdate, caller: Identity) -> tuple[int, int]:
        # null từ client = không đổi
        changes = {k: v for k, v in patch.model_dump(exclude_unset=True).items() if v is not None}
        with self._db.session() as session:
            food = session.get(Food, food_id)
            if food is None:
                return 0, 0
            ensure_owner(caller, food.seller_email)
            modified = False
            for key, value in changes.items():
                if getattr(food, key) != value:
                    setattr(food, key, value)
                    modified = True
            return 1, int(modified)

    def _do_delete(self, food_id: int, caller: Identity) -> int:
        with self._db.session() as session:
            food = session.get(Food, food_id)
            if food is None:
                return 0
            ensure_owner(caller, food.seller_email)
            session.delete(food)
            logger.info(f"Food deleted id={food_id} by {caller.email}")
            return 1
