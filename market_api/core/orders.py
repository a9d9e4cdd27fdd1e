"""
core/orders.py – OrderService class.
Trách nhiệm: đặt hàng (trừ kho + tạo order trong 1 transaction), liệt kê và huỷ order.

Luật nghiệp vụ khi đặt hàng:
  - food phải tồn tại                 → NotFoundError
  - người mua ≠ người bán             → OrderRejected("own_food")
  - số lượng mua ≤ tồn kho            → OrderRejected("insufficient_stock")
Tồn kho được kiểm tra lại ngay trong câu UPDATE (quantity >= q) nên hai order
đồng thời không thể bán quá số lượng.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Literal, Union

from sqlalchemy import update

from ..db.models import Food, Order
from ..db.session import Database
from ..models import OrderItem
from .auth import Identity, ensure_owner
from .errors import NotFoundError

logger = logging.getLogger(__name__)

RejectReason = Literal["own_food", "insufficient_stock"]

OWN_FOOD_MSG           = "You cannot buy your own food"
INSUFFICIENT_STOCK_MSG = "Not enough food in stock"


@dataclass(frozen=True)
class OrderPlaced:
    order_id: int


@dataclass(frozen=True)
class OrderRejected:
    reason: RejectReason
    message: str


OrderResult = Union[OrderPlaced, OrderRejected]


class OrderService:
    """Đặt/huỷ/liệt kê order trên bảng `orders` + `foods`."""

    def __init__(self, db: Database) -> None:
        self._db = db

    # ── Public ─────────────────────────────────────────────────────────────────

    async def place(
        self,
        buyer_email: str,
        food_id: int,
        quantity: int,
        buyer_name: str = "",
    ) -> OrderResult:
        """Đặt `quantity` phần của food `food_id` cho `buyer_email`."""
        if quantity <= 0:
            raise ValueError("Order quantity must be positive")
        return await asyncio.get_event_loop().run_in_executor(
            None, self._do_place, buyer_email, food_id, quantity, buyer_name
        )

    async def list_for_buyer(self, email: str) -> list[OrderItem]:
        """Order của 1 người mua, mới nhất trước."""
        return await asyncio.get_event_loop().run_in_executor(
            None, self._fetch_for_buyer, email
        )

    async def cancel(self, order_id: int, caller: Identity) -> int:
        """Xoá order của chính caller. Trả về số order bị xoá."""
        return await asyncio.get_event_loop().run_in_executor(
            None, self._do_cancel, order_id, caller
        )

    # ── Private ────────────────────────────────────────────────────────────────

    def _do_place(self, buyer_email: str, food_id: int, quantity: int, buyer_name: str) -> OrderResult:
        with self._db.session() as session:
            food = session.get(Food, food_id)
            if food is None:
                raise NotFoundError(f"Food id={food_id} not found")

            if buyer_email == food.seller_email:
                logger.info(f"Order rejected (own_food): food={food_id} buyer={buyer_email}")
                return OrderRejected("own_food", OWN_FOOD_MSG)

            if quantity > (food.quantity or 0):
                logger.info(f"Order rejected (insufficient_stock): food={food_id} want={quantity} have={food.quantity}")
                return OrderRejected("insufficient_stock", INSUFFICIENT_STOCK_MSG)

            # Điều kiện quantity >= q nằm trong UPDATE → không oversell khi có race
            result = session.execute(
                update(Food)
                .where(Food.id == food_id, Food.quantity >= quantity)
                .values(
                    quantity=Food.quantity - quantity,
                    order_count=Food.order_count + 1,
                    buyer_email=buyer_email,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                logger.info(f"Order rejected (stock changed concurrently): food={food_id}")
                return OrderRejected("insufficient_stock", INSUFFICIENT_STOCK_MSG)

            order = Order(
                food_id=food.id,
                buyer_email=buyer_email,
                buyer_name=buyer_name or "",
                quantity=quantity,
                food_name=food.food_name,
                food_image=food.food_image,
                price=food.price,
                seller_email=food.seller_email,
            )
            session.add(order)
            # flush để lấy id; commit chung với UPDATE khi thoát context
            session.flush()
            logger.info(f"Order placed id={order.id} food={food_id} qty={quantity} buyer={buyer_email}")
            return OrderPlaced(order.id)

    def _fetch_for_buyer(self, email: str) -> list[OrderItem]:
        with self._db.session() as session:
            rows = (
                session.query(Order)
                .filter(Order.buyer_email == email)
                .order_by(Order.ordered_at.desc(), Order.id.desc())
                .all()
            )
        return [OrderItem.model_validate(r) for r in rows]

    def _do_cancel(self, order_id: int, caller: Identity) -> int:
        with self._db.session() as session:
            order = session.get(Order, order_id)
            if order is None:
                raise NotFoundError(f"Order id={order_id} not found")
            ensure_owner(caller, order.buyer_email)
            session.delete(order)
            logger.info(f"Order cancelled id={order_id} by {caller.email}")
            return 1
